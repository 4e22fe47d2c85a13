"""Define relevant errno."""
__all__ = ['EAGAIN', 'EINTR', 'EIO', 'interrupted']
import errno

EINTR = getattr(errno, 'EINTR', 4)
EAGAIN = getattr(errno, 'EAGAIN', 11)
EIO = getattr(errno, 'EIO', 5)

def interrupted(e):
    """Return whether EnvironmentError e is a transient interrupt."""
    return isinstance(e, InterruptedError) or e.errno == EINTR
