"""Records over blocking file-like objects.

StreamWriter needs `write()` and `flush()`.  Partial writes are
continued until the whole frame is written.
StreamReader needs `readinto1()` or `readinto()`.  It maintains a single
scratch buffer that records are read into, so a returned view is
overwritten by the next read.

EINTR is retried everywhere.  Other errors from the file propagate.

NOTE: the wrapped file is expected to be blocking.  A would-block result
raises BlockingIOError and leaves the stream in an unspecified state.
"""
__all__ = ['StreamReader', 'StreamWriter']
import io

from . import bases, codec, formats
from .errors import IncompleteHeader, TruncatedRecord

class StreamWriter(bases.FileWrapper, bases.Writer):
    def __init__(self, f, fmt):
        """Initialize a StreamWriter.

        f: the file to wrap.  Should be opened for writing.
        fmt: Format or format name.
        """
        super(StreamWriter, self).__init__(f)
        self.fmt = formats.lookup(fmt)

    @classmethod
    def create(cls, path, fmt, exclusive=False):
        """Open path for writing.

        exclusive: bool, raise FileExistsError if path exists instead of
            truncating it.
        """
        return cls(io.open(path, 'xb' if exclusive else 'wb'), fmt)

    def write(self, data):
        codec.write_record(self.f.write, self.fmt, data)

    def flush(self):
        self.f.flush()

    def detach(self):
        self.flush()
        return super(StreamWriter, self).detach()

    def close(self):
        """Flush and close the underlying file.

        The file is closed even if the flush fails.
        """
        if self.f is not None:
            try:
                self.flush()
            finally:
                super(StreamWriter, self).detach().close()

class StreamReader(bases.FileWrapper, bases.Reader):
    def __init__(
        self, f, fmt, max_record_size, factor=1.5,
        initial=io.DEFAULT_BUFFER_SIZE, **kwargs):
        """Initialize a StreamReader.

        f: the file to wrap.  Should be opened for reading.
        fmt: Format or format name.
        max_record_size: int, largest record to accept.  For chunks,
            this (capped by initial) is the read size.
        factor: float, scratch buffer growth factor.
        initial: int, initial scratch buffer size cap.
        """
        super(StreamReader, self).__init__(f, **kwargs)
        if factor <= 1:
            raise ValueError('Growth factor must be > 1')
        self.fmt = formats.lookup(fmt)
        self.max_record_size = codec.check_max_record_size(
            self.fmt, max_record_size)
        if not self.fmt.framed and initial < 1:
            raise ValueError('chunk reads require initial >= 1')
        self.factor = factor
        self.buf = bytearray(min(max_record_size, initial))
        self.view = memoryview(self.buf)
        self.header = bytearray(self.fmt.width)
        self.hview = memoryview(self.header)
        self._readinto = getattr(self.f, 'readinto1', self.f.readinto)

    @classmethod
    def open(cls, path, fmt, max_record_size, **kwargs):
        return cls(io.open(path, 'rb'), fmt, max_record_size, **kwargs)

    def detach(self):
        ret = super(StreamReader, self).detach()
        self._readinto = None
        return ret

    def _grow(self, target):
        """Replace the scratch buffer with one of at least target bytes.

        Never exceeds max_record_size.  A new bytearray is allocated
        because old views may still be exported.
        """
        size = int(len(self.buf) * self.factor)
        size = max(target, min(size, self.max_record_size))
        self.buf = bytearray(size)
        self.view = memoryview(self.buf)

    def _next(self):
        if not self.fmt.framed:
            amt = codec.readfull(self._readinto, self.view)
            if amt:
                return self.view[:amt]
            return None
        width = self.fmt.width
        got = codec.readfull(self._readinto, self.hview)
        if got == 0:
            return None
        elif got < width:
            raise IncompleteHeader(got, width)
        length = codec.unpack_header(self.fmt, self.header)
        codec.check_length(length, self.max_record_size)
        if length > len(self.buf):
            self._grow(length)
        view = self.view[:length]
        got = codec.readfull(self._readinto, view)
        if got < length:
            raise TruncatedRecord(got, length)
        return view
