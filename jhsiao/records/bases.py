"""Basic classes.

Readers and Writers deal with a sequence of records rather than a
sequence of bytes.  Everything is blocking.

A view returned by a Reader is only valid until the next read on the
same Reader.  The Reader releases it at that point so stale access
raises ValueError instead of silently seeing different data.
"""
__all__ = [
    'FileWrapper',
    'Reader',
    'Writer',
]

import traceback

from .errors import RecordError, UnexpectedEOF

class FileWrapper(object):
    def __init__(self, f, **kwargs):
        super(FileWrapper, self).__init__(**kwargs)
        self.f = f

    def __enter__(self):
        return self
    def __exit__(self, tp, exc, tb):
        self.close()

    def fileno(self):
        return self.f.fileno()

    def detach(self):
        """Unwrap the file and return it.

        This instance should no longer be used.
        """
        ret = self.f
        self.f = None
        return ret

    def close(self):
        """Close the underlying file."""
        if self.f is not None:
            self.detach().close()

class Reader(object):
    """Read records.

    Subclasses implement `_next()`.
    """
    def __init__(self, verbose=False, **kwargs):
        """Initialize a Reader.

        verbose: bool, print tracebacks of framing errors.
        """
        super(Reader, self).__init__(**kwargs)
        self.verbose = verbose
        self._last = None

    def _next(self):
        """Return a memoryview of the next record or None if done."""
        raise NotImplementedError

    def maybe_read(self):
        """Read the next record.

        Return a memoryview of the payload, or None at a clean end of
        input.  The view is released on the next call.
        """
        last = self._last
        if last is not None:
            self._last = None
            try:
                last.release()
            except BufferError:
                # still exported (ex. numpy.frombuffer)
                pass
        try:
            view = self._next()
        except RecordError:
            if self.verbose:
                traceback.print_exc()
            raise
        self._last = view
        return view

    def read(self):
        """Same as maybe_read(), but raise UnexpectedEOF at end."""
        view = self.maybe_read()
        if view is None:
            raise UnexpectedEOF('no more records')
        return view

    def readinto(self, out):
        """Append bytes of all remaining records to out.

        out: container
            out should have an `append()` method.

        Return the number of records appended.
        """
        count = 0
        view = self.maybe_read()
        while view is not None:
            out.append(view.tobytes())
            count += 1
            view = self.maybe_read()
        return count

    def __iter__(self):
        """Iterate over bytes copies of remaining records."""
        view = self.maybe_read()
        while view is not None:
            yield view.tobytes()
            view = self.maybe_read()

class Writer(object):
    """Write records.

    Leaving a with block flushes.
    """
    def __enter__(self):
        return self
    def __exit__(self, tp, exc, tb):
        self.flush()

    def write(self, data):
        """Write a new record.

        data: bytes-like object (C-contiguous buffer).
        """
        raise NotImplementedError

    def flush(self):
        """Persist any buffered data."""
        pass
