"""Loading, creating and saving the current project file."""

import logging
import os
from typing import Optional

import yaml

from .project import Project
from .store import AssetStore

logger = logging.getLogger(__name__)


class ProjectLoader:
    """Keeps one project open and the assets of its packages loaded."""

    def __init__(self, asset_store: Optional[AssetStore] = None, root: Optional[str] = None):
        self.asset_store = AssetStore() if asset_store is None else asset_store
        self.root = None if root is None else os.fspath(root)
        self._project: Optional[Project] = None
        self._project_path = ""

    def __enter__(self) -> "ProjectLoader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.unload_project()

    @property
    def current_project(self) -> Optional[Project]:
        return self._project

    @property
    def current_project_file(self) -> str:
        return self._project_path

    def _package_path(self, pkg: str) -> str:
        return pkg if self.root is None else os.path.join(self.root, pkg)

    def load_project(self, file_name: str) -> Project:
        """Open ``file_name``, replacing the current project, and load its packages."""
        with open(file_name, encoding="utf-8") as handle:
            text = handle.read()
        self.unload_project()
        project = Project.from_node(yaml.safe_load(text), self.root)
        self._project = project
        self._project_path = os.fspath(file_name)
        for pkg in project.pkg_files:
            self.asset_store.load_package(self._package_path(pkg))
        return project

    def new_project(self, file_name: str) -> Project:
        """Replace the current project with an empty one saved to ``file_name``."""
        self.unload_project()
        self._project = Project(self.root)
        self._project_path = os.fspath(file_name)
        return self._project

    def save_project(self) -> None:
        """Write the current project to its file."""
        if self._project is None:
            raise RuntimeError("no project is loaded")
        text = yaml.safe_dump(self._project.to_node(), sort_keys=False)
        with open(self._project_path, "w", encoding="utf-8") as handle:
            handle.write(text)

    def unload_project(self) -> None:
        """Close the current project and unload all assets."""
        if self._project is None:
            return
        self.asset_store.unload_all_assets()
        logger.info("Project %s unloaded", self._project_path)
        self._project = None
        self._project_path = ""