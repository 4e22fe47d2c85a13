"""Records in memory.

BufferWriter concatenates frames into a single bytearray.
BufferReader splits a bytes-like object back into records.  Returned
views point directly into the held data (no copies).
"""
__all__ = ['BufferWriter', 'BufferReader']

from . import bases, codec, formats

class BufferWriter(bases.Writer):
    """Concatenate all records into a single buffer."""
    def __init__(self, fmt):
        self.fmt = formats.lookup(fmt)
        self.buf = bytearray()

    def __len__(self):
        return len(self.buf)

    def write(self, data):
        view = codec.asview(data)
        # header first: EncodingError must leave buf untouched
        self.buf += codec.pack_header(self.fmt, view.nbytes)
        self.buf += view

    def getvalue(self):
        """Return an owned copy of the written bytes."""
        return bytes(self.buf)

    def getbuffer(self):
        """Return a memoryview of the written bytes.

        No copy is made.  Further writes raise BufferError while the
        view is alive.
        """
        return memoryview(self.buf)

class BufferReader(bases.Reader):
    """Split a buffer into records.

    The data is either borrowed (a view of the caller's object) or
    owned (a private copy).  Use `to_owned()` to get a reader that does
    not depend on the caller's object anymore.
    """
    def __init__(self, data, fmt, max_record_size, copy=False, **kwargs):
        """Initialize a BufferReader.

        data: bytes-like object holding the records.
        fmt: Format or format name.
        max_record_size: int, largest record (or chunk) to return.
        copy: bool, copy data instead of borrowing it.
        """
        super(BufferReader, self).__init__(**kwargs)
        self.fmt = formats.lookup(fmt)
        self.max_record_size = codec.check_max_record_size(
            self.fmt, max_record_size)
        view = codec.asview(data)
        if copy:
            view = memoryview(view.tobytes())
        self.view = view
        self.owned = copy
        self.offset = 0
        self.origin = 0

    @classmethod
    def from_writer(cls, writer, max_record_size, **kwargs):
        """Read back what a BufferWriter wrote (borrowed)."""
        return cls(writer.getbuffer(), writer.fmt, max_record_size, **kwargs)

    def tell(self):
        """Return the position of the cursor within the original data."""
        return self.origin + self.offset

    def remaining(self):
        """Return the number of unread bytes."""
        return max(len(self.view) - self.offset, 0)

    def _next(self):
        loc = codec.locate(
            self.view, self.offset, len(self.view),
            self.fmt, self.max_record_size)
        if loc is None:
            return None
        start, end = loc
        self.offset = end
        return self.view[start:end]

    def to_owned(self):
        """Return an owned reader over the unread data.

        Only the remainder is copied.  The new reader reports the same
        `tell()` and returns the same records this reader would.  An
        exhausted reader gives an empty remainder.
        """
        ret = type(self)(
            self.view[self.offset:], self.fmt, self.max_record_size,
            copy=True, verbose=self.verbose)
        ret.origin = self.tell()
        return ret
