"""Framing routines shared by the buffer and stream implementations.

Everything here is stateless.  The readers/writers hold the state
(offsets, scratch buffers) and call into these functions so framing
logic only lives in one place.
"""
__all__ = [
    'asview',
    'pack_header',
    'unpack_header',
    'check_length',
    'check_max_record_size',
    'locate',
    'readfull',
    'writeall',
    'write_record',
]

from . import errnos
from .errors import (
    EncodingError, IncompleteHeader, RecordTooLarge, TruncatedRecord)

def asview(data):
    """Return a flat unsigned byte memoryview of data.

    data must support the buffer protocol and be C-contiguous.  The
    record length is the view's nbytes, not len(data) (which differs
    for multi-dimensional or non-byte arrays).
    """
    view = memoryview(data)
    if view.ndim != 1 or view.format != 'B':
        view = view.cast('B')
    return view

def pack_header(fmt, length):
    """Return the header bytes for a payload of length bytes.

    Chunks have no header.  Raise EncodingError if length cannot be
    represented by the format's header.
    """
    if not fmt.framed:
        return b''
    if length > fmt.limit:
        raise EncodingError(
            'record of {} bytes does not fit in a {} byte {} header'.format(
                length, fmt.width, fmt.name))
    return fmt.header.pack(length)

def unpack_header(fmt, buf, offset=0):
    """Decode the payload length from a full header at buf[offset:]."""
    return fmt.header.unpack_from(buf, offset)[0]

def check_length(length, max_record_size):
    if length > max_record_size:
        raise RecordTooLarge(length, max_record_size)

def check_max_record_size(fmt, max_record_size):
    """Validate a reader's max_record_size for fmt.

    Chunks need at least 1 byte or every read would be empty.
    """
    if max_record_size < 0:
        raise ValueError(
            'max_record_size must be >= 0, got {}'.format(max_record_size))
    if not fmt.framed and max_record_size < 1:
        raise ValueError('chunk reads require max_record_size >= 1')
    return max_record_size

def locate(view, offset, stop, fmt, max_record_size):
    """Locate the next record in view[offset:stop].

    Return (start, end) of the payload, or None if offset is at stop.
    The offset of the following record is always end.
    """
    remain = stop - offset
    if remain <= 0:
        return None
    if not fmt.framed:
        return offset, offset + min(max_record_size, remain)
    width = fmt.width
    if remain < width:
        raise IncompleteHeader(remain, width)
    length = unpack_header(fmt, view, offset)
    check_length(length, max_record_size)
    start = offset + width
    end = start + length
    if end > stop:
        raise TruncatedRecord(stop - start, length)
    return start, end

def readfull(readinto, view):
    """Read into view until full or end of stream.

    readinto: the readinto function of the source.
    view: writable memoryview to fill.

    EINTR is retried.  Return the number of bytes read.  A result less
    than len(view) means the stream ended.
    """
    target = len(view)
    pos = 0
    while pos < target:
        try:
            amt = readinto(view[pos:])
        except EnvironmentError as e:
            if not errnos.interrupted(e):
                raise
            continue
        if amt is None:
            raise BlockingIOError(errnos.EAGAIN, 'read would block', pos)
        elif amt == 0:
            break
        pos += amt
    return pos

def writeall(write, view):
    """Call write until all of view is written.

    Partial writes are continued and EINTR is retried.  A write that
    accepts nothing raises EIO.  Return the number of bytes written.
    """
    target = len(view)
    pos = 0
    while pos < target:
        try:
            amt = write(view[pos:])
        except EnvironmentError as e:
            if not errnos.interrupted(e):
                raise
            continue
        if amt is None:
            raise BlockingIOError(errnos.EAGAIN, 'write would block', pos)
        elif amt == 0:
            raise OSError(errnos.EIO, 'write made no progress')
        pos += amt
    return pos

def write_record(write, fmt, data):
    """Write a header (if any) and then the payload.

    The header is completely written before the payload begins.
    Return the payload length.
    """
    view = asview(data)
    header = pack_header(fmt, view.nbytes)
    if header:
        writeall(write, header)
    writeall(write, view)
    return view.nbytes
