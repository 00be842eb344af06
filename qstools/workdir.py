"""Split local and remote paths into a working directory and a file name."""

from __future__ import annotations

import os

__all__ = ["parse_fs_work_dir", "parse_qs_work_dir"]

_QS_SEPARATOR = "/"


def parse_fs_work_dir(path: str) -> tuple[str, str]:
    """Split a local path into an absolute work dir (ending with a separator) and a file.

    '/path/to/target' gives ('/path/to/', 'target'), '/path/to/' gives
    ('/path/to/', '') and '.' or '' gives ('<cwd>/', '').
    """
    separator = os.sep
    if path == "":
        path = "."
    abs_path = os.path.abspath(path)
    # abspath drops the trailing separator, which marks a directory here.
    if path.endswith(separator) or path.endswith("."):
        abs_path = abs_path.rstrip(separator) + separator
    head, sep, tail = abs_path.rpartition(separator)
    return head + sep, tail


def parse_qs_work_dir(path: str, disable_uri_cleaning: bool = False) -> tuple[str, str]:
    """Split a remote key into a work dir and a file, always using '/'.

    Unless ``disable_uri_cleaning`` is set, repeated separators are collapsed.
    """
    path = _QS_SEPARATOR + path
    pieces = path.split(_QS_SEPARATOR)
    parts = [piece + _QS_SEPARATOR for piece in pieces[:-1]] + [pieces[-1]]

    if not disable_uri_cleaning:
        parts = parts[:1] + ["" if part == _QS_SEPARATOR else part for part in parts[1:]]

    return "".join(parts[:-1]), parts[-1]