import os
from unittest import mock

import pytest

from qstools.workdir import parse_fs_work_dir, parse_qs_work_dir


@pytest.mark.parametrize(
    "path, wd, name",
    [
        ("/path/to/file", "/path/to/", "file"),
        ("/path/to/", "/path/to/", ""),
        ("/", "/", ""),
        ("path/to/file", "/path/to/", "file"),
        ("path/to/dir/", "/path/to/dir/", ""),
        ("/path/to/dir/", "/path/to/dir/", ""),
        ("path///to///dir/", "/path/to/dir/", ""),
        ("", "/", ""),
        ("////", "/", ""),
    ],
)
def test_parse_qs_work_dir(path, wd, name):
    assert parse_qs_work_dir(path) == (wd, name)


def test_parse_qs_work_dir_without_cleaning_keeps_separators():
    wd, name = parse_qs_work_dir("path//file", disable_uri_cleaning=True)
    assert (wd, name) == ("/path//", "file")


@pytest.mark.parametrize(
    "path, wd, name",
    [
        ("/path/to/file", "/path/to/", "file"),
        ("/path/to/", "/path/to/", ""),
        ("/", "/", ""),
    ],
)
def test_parse_fs_work_dir_absolute(path, wd, name):
    assert parse_fs_work_dir(path) == (wd, name)


@pytest.mark.parametrize(
    "path, suffix, name",
    [
        ("path/to/file", "/path/to/", "file"),
        ("", "/", ""),
        (".", "/", ""),
        ("-", "/", "-"),
    ],
)
def test_parse_fs_work_dir_relative(path, suffix, name):
    pwd = os.getcwd()
    assert parse_fs_work_dir(path) == (pwd + suffix, name)


def test_parse_fs_work_dir_error():
    with mock.patch("os.path.abspath", side_effect=OSError("bad path")):
        with pytest.raises(OSError):
            parse_fs_work_dir("whatever")