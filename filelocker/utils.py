"""Utility functions for local files"""

import os
import stat
import ntpath

WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


def file_name(path: str) -> str:
    """Base name of a path, whether it uses / or \\ separators"""
    return ntpath.basename(path)


def file_extension(path: str) -> str:
    """Lower-cased extension including the dot, or '' if there is none"""
    return os.path.splitext(file_name(path))[1].lower()


def set_read_only(path: str) -> None:
    """Drop every write permission bit on a local file"""
    mode = os.stat(path).st_mode
    os.chmod(path, stat.S_IMODE(mode) & ~WRITE_BITS)


def clear_read_only(path: str) -> None:
    """Give the owner write permission on a local file again"""
    mode = os.stat(path).st_mode
    os.chmod(path, stat.S_IMODE(mode) | stat.S_IWUSR)


def is_read_only(path: str) -> bool:
    return not os.stat(path).st_mode & stat.S_IWUSR
