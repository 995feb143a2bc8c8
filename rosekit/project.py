"""A game project: its asset packages, its levels and the level it starts in."""

import logging
import os
from collections.abc import Mapping
from typing import Any, Optional

from .paths import relative_path

logger = logging.getLogger(__name__)


def _unique(items: list) -> list:
    return list(dict.fromkeys(items))


class Project:
    """Lists of package and level files, stored relative to ``root``.

    ``root`` defaults to the current directory at the time of each call.
    """

    def __init__(self, root: Optional[str] = None):
        self.root = None if root is None else os.fspath(root)
        self._pkg_files: list[str] = []
        self._level_files: list[str] = []
        self._start_level = -1

    def _relative(self, file: str) -> str:
        root = os.getcwd() if self.root is None else self.root
        return relative_path(root, os.fspath(file))

    @classmethod
    def from_node(cls, node: Any, root: Optional[str] = None) -> "Project":
        """Build a project from a parsed project mapping."""
        if node is None:
            node = {}
        if not isinstance(node, Mapping):
            raise ValueError("project must be a mapping")
        project = cls(root)
        for level in node.get("Levels") or []:
            project.add_level(str(level))
        for pkg in node.get("Packages") or []:
            project.add_package(str(pkg))
        if node.get("StartLevel") is not None:
            project._start_level = int(node["StartLevel"])
        return project

    def to_node(self) -> dict:
        """Return the project as a mapping, dropping duplicate entries."""
        node: dict = {
            "Packages": _unique(self._pkg_files),
            "Levels": _unique(self._level_files),
        }
        if self._start_level != -1:
            node["StartLevel"] = self._start_level
        return node

    @property
    def pkg_files(self) -> tuple:
        return tuple(self._pkg_files)

    @property
    def level_files(self) -> tuple:
        return tuple(self._level_files)

    @property
    def start_level(self) -> int:
        """Index of the first level, or -1 when there is none."""
        return self._start_level

    @start_level.setter
    def start_level(self, level: int) -> None:
        if not 0 <= level < len(self._level_files):
            raise IndexError(f"level doesn't exist: {level}")
        self._start_level = level

    def add_package(self, file: str) -> None:
        self._pkg_files.append(self._relative(file))

    def remove_package(self, file: str) -> None:
        """Remove every entry naming ``file``."""
        target = self._relative(file)
        self._pkg_files = [p for p in self._pkg_files if p != target]

    def add_level(self, file: str) -> None:
        """Add a level; the first level added becomes the start level."""
        self._level_files.append(self._relative(file))
        if self._start_level == -1:
            self._start_level = 0

    def remove_level(self, file: str) -> None:
        """Remove every entry naming ``file``; no levels left means no start level."""
        target = self._relative(file)
        self._level_files = [lv for lv in self._level_files if lv != target]
        if not self._level_files:
            self._start_level = -1

    def pkg_file(self, index: int) -> str:
        if not 0 <= index < len(self._pkg_files):
            raise IndexError(f"pkg doesn't exist: {index}")
        return self._pkg_files[index]

    def level_file(self, index: int) -> str:
        if not 0 <= index < len(self._level_files):
            raise IndexError(f"level doesn't exist: {index}")
        return self._level_files[index]