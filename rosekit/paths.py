"""Path helpers used when recording asset and project files."""

import os


def relative_path(root: str, path: str) -> str:
    """Return ``path`` expressed relative to ``root``, resolving both first."""
    return os.path.relpath(os.path.realpath(path), os.path.realpath(root))


def file_extension(file_name: str) -> str:
    """Return the extension of ``file_name`` including its dot, or ``""``."""
    return os.path.splitext(file_name)[1]


def file_directory(file_name: str) -> str:
    """Return the directory part of ``file_name``."""
    return os.path.dirname(file_name)