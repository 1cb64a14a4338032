"""
Procargs existence validator.

validate_path(candidate, context, kind) probes the filesystem once, synchronously,
and either returns True or raises a PathError subclass:

- "file"     → the candidate must exist and be a regular file.
- "dir"      → the candidate must exist and be a directory.
- "filepath" → the candidate's containing directory must exist and be a directory
               (the final segment itself need not exist yet).

Faults
- PathNotFoundError: the probed path (or one of its parents) does not exist.
- WrongPathKindError: it exists but is not the expected kind.
- PathAccessError: any other OS failure while probing (e.g., permission denied).
"""
import errno
import os
import os.path
import stat
from types import MappingProxyType

from .faults import *
from .utils import Unset, ordinal

# kind -> (what the probed path must be, stat predicate)
_KINDS = MappingProxyType({
    "file": ("file", stat.S_ISREG),
    "dir": ("directory", stat.S_ISDIR),
    "filepath": ("directory", stat.S_ISDIR),
})


def _where(context, index):
    if index is Unset:
        return "in %r" % context
    return "in %r at %s position" % (context, ordinal(index))


def validate_path(candidate, context, kind, /, *, index=Unset):
    """
    Check that a path-typed value names something that exists with the right kind.

    Parameters
    - candidate: str
      The raw path as supplied by the user (relative or absolute).
    - context: str
      The whole token the path came from, quoted in messages.
    - kind: "file" | "dir" | "filepath"
      What the candidate must be (for "filepath", its containing directory).
    - index: int (keyword-only, optional)
      1-based token position, used for position-first messages.

    Returns
    - True when the probe succeeds.
    """
    try:
        expected, predicate = _KINDS[kind]
    except (KeyError, TypeError):
        raise TypeError("validate_path() 'kind' must be one of: %s" % ", ".join(_KINDS)) from None

    probed = candidate
    if kind == "filepath":
        # "out.txt" has no directory component: it lives in the current directory
        probed = os.path.dirname(candidate) or os.curdir

    try:
        status = os.stat(probed)
    except OSError as exception:
        if exception.errno in (errno.ENOENT, errno.ENOTDIR):
            raise PathNotFoundError(
                "%s %r does not exist %s" % (expected, probed, _where(context, index)),
                title="path not found",
                code=FaultCode.PATH_NOT_FOUND,
                hint="check the spelling; relative paths resolve from %r" % os.getcwd(),
                input=candidate,
                path=probed,
                token=context,
                index=index,
                docs=getdoc(FaultCode.PATH_NOT_FOUND),
            ) from None
        raise PathAccessError(
            "%s %r cannot be accessed %s: %s" % (expected, probed, _where(context, index), exception.strerror),
            title="path not accessible",
            code=FaultCode.PATH_ACCESS,
            hint="check the permissions of %r and its parents" % probed,
            input=candidate,
            path=probed,
            token=context,
            index=index,
            docs=getdoc(FaultCode.PATH_ACCESS),
        ) from exception

    if not predicate(status.st_mode):
        raise WrongPathKindError(
            "%r is not a %s %s" % (probed, expected, _where(context, index)),
            title="wrong kind of path",
            code=FaultCode.WRONG_PATH_KIND,
            hint="pass a path to a %s here" % expected,
            input=candidate,
            path=probed,
            token=context,
            index=index,
            docs=getdoc(FaultCode.WRONG_PATH_KIND),
        )

    return True


__all__ = (
    "validate_path",
)
