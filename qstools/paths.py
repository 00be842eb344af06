"""Classify local and remote paths and the direction of a transfer."""

from __future__ import annotations

import enum
import logging
import os
import stat

__all__ = [
    "QS_PREFIX",
    "FlowType",
    "ObjectType",
    "PathParseError",
    "parse_flow",
    "parse_local_path",
    "parse_qs_path",
    "is_qs_path",
]

QS_PREFIX = "qs://"

_log = logging.getLogger(__name__)


class FlowType(enum.Enum):
    """Direction of data between the local machine and remote storage."""

    INVALID = "invalid"
    TO_REMOTE = "to_remote"
    TO_LOCAL = "to_local"
    AT_REMOTE = "at_remote"


class ObjectType(enum.Enum):
    """Kind of object a path refers to."""

    INVALID = "invalid"
    FILE = "file"
    DIR = "dir"
    STREAM = "stream"


class PathParseError(OSError):
    """Raised when a local path cannot be inspected."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"parse path failed: {{unhandled error: {cause}}}")
        self.path = path
        self.cause = cause


def is_qs_path(s: str) -> bool:
    """Return whether ``s`` names a remote object, i.e. starts with 'qs://'."""
    return s.startswith(QS_PREFIX)


def parse_flow(src: str, dst: str) -> FlowType:
    """Work out the direction of data between ``src`` and ``dst``.

    An empty ``dst`` means the operation happens at the remote side only.
    Two local or two remote paths make an invalid flow.
    """
    if dst == "":
        return FlowType.AT_REMOTE

    if is_qs_path(src) == is_qs_path(dst):
        _log.error("Action between <%s> and <%s> is invalid", src, dst)
        return FlowType.INVALID

    if is_qs_path(src):
        return FlowType.TO_LOCAL
    return FlowType.TO_REMOTE


def parse_local_path(p: str) -> ObjectType:
    """Classify a local path: '-' is stdin, existing paths by what they are.

    A path that does not exist is a directory when it ends with the path
    separator and a file otherwise.
    """
    if p == "-":
        return ObjectType.STREAM

    try:
        info = os.stat(p)
    except FileNotFoundError:
        if p.endswith(os.sep):
            return ObjectType.DIR
        return ObjectType.FILE
    except OSError as exc:
        raise PathParseError(p, exc) from exc

    if stat.S_ISDIR(info.st_mode):
        return ObjectType.DIR
    return ObjectType.FILE


def parse_qs_path(p: str) -> tuple[ObjectType, str, str]:
    """Split a remote path into (object type, bucket name, object key).

    The 'qs://' prefix is optional. A bare bucket, or a bucket followed only
    by '/', is a directory; so is any key ending with '/'.
    """
    if p.startswith(QS_PREFIX):
        p = p[len(QS_PREFIX):]

    bucket, sep, key = p.partition("/")
    if not sep or key == "":
        return ObjectType.DIR, bucket, ""
    if p.endswith("/"):
        return ObjectType.DIR, bucket, key
    return ObjectType.FILE, bucket, key