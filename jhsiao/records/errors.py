"""Record errors.

Errors from the wrapped file (other than EINTR) are not wrapped and
propagate as-is.
"""
__all__ = [
    'RecordError',
    'EncodingError',
    'RecordTooLarge',
    'IncompleteHeader',
    'TruncatedRecord',
    'UnexpectedEOF',
]

class RecordError(ValueError):
    """Base class for framing errors."""

class EncodingError(RecordError):
    """Payload length does not fit in the header."""

class RecordTooLarge(RecordError):
    """Decoded length exceeds max_record_size."""
    def __init__(self, length, max_record_size):
        super(RecordTooLarge, self).__init__(
            'record of {} bytes exceeds max_record_size {}'.format(
                length, max_record_size))
        self.length = length
        self.max_record_size = max_record_size

class IncompleteHeader(RecordError, EOFError):
    """Input ended partway through a header."""
    def __init__(self, got, width):
        super(IncompleteHeader, self).__init__(
            'incomplete record header: {}/{} bytes'.format(got, width))
        self.got = got
        self.width = width

class TruncatedRecord(RecordError, EOFError):
    """Input ended partway through a payload."""
    def __init__(self, got, length):
        super(TruncatedRecord, self).__init__(
            'truncated record: {}/{} bytes'.format(got, length))
        self.got = got
        self.length = length

class UnexpectedEOF(RecordError, EOFError):
    """A record was required but none remain."""
