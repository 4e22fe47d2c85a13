"""Hash records as they pass through a Reader or Writer.

All payloads are hashed as if concatenated into a single byte string.
Headers are never hashed so the digest does not depend on the format.
"""
__all__ = ['HashingReader', 'HashingWriter']
import hashlib

from . import bases, codec

class Hashing(object):
    def __init__(self, inner, hasher, **kwargs):
        """Initialize a hashing wrapper.

        inner: the wrapped Reader or Writer.
        hasher: object with `update(bytes)` (ex. hashlib.sha256()) or
            the name of a hashlib algorithm.
        """
        super(Hashing, self).__init__(**kwargs)
        if isinstance(hasher, str):
            hasher = hashlib.new(hasher)
        self.inner = inner
        self.hasher = hasher

    def digest(self):
        return self.hasher.digest()

    def hexdigest(self):
        return self.hasher.hexdigest()

    def __enter__(self):
        return self
    def __exit__(self, tp, exc, tb):
        self.close()

    def detach(self):
        """Return the wrapped object, unwrapping it too if possible."""
        detach = getattr(self.inner, 'detach', None)
        if detach is None:
            return self.inner
        return detach()

    def close(self):
        """Close inner if it can be closed, else flush writers."""
        close = getattr(self.inner, 'close', None)
        if close is not None:
            close()
        elif isinstance(self, bases.Writer):
            self.flush()

class HashingReader(Hashing, bases.Reader):
    def _next(self):
        view = self.inner.maybe_read()
        if view is not None:
            self.hasher.update(view)
        return view

class HashingWriter(Hashing, bases.Writer):
    def write(self, data):
        view = codec.asview(data)
        self.inner.write(view)
        self.hasher.update(view)

    def flush(self):
        self.inner.flush()
