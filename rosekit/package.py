"""Asset packages: lists of asset files with metadata, stored as YAML."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

import yaml

from .asset import AssetType
from .guid import Guid, new_guid

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class AssetMetaData:
    """Metadata shared by every asset: the name it is loaded under."""

    name: str = ""

    @classmethod
    def from_node(cls, node: Mapping) -> "AssetMetaData":
        return cls(name=_text(node["name"]))

    def to_node(self, node: dict) -> dict:
        """Write the metadata fields into ``node`` and return it."""
        node["name"] = self.name
        return node


@dataclass
class TextureMetaData(AssetMetaData):
    """Texture metadata: adds the pixels-per-unit scale."""

    ppu: int = 100

    @classmethod
    def from_node(cls, node: Mapping) -> "TextureMetaData":
        return cls(name=_text(node["name"]), ppu=int(node["ppu"]))

    def to_node(self, node: dict) -> dict:
        super().to_node(node)
        node["ppu"] = self.ppu
        return node


def _metadata_class(asset_type: AssetType) -> type:
    return TextureMetaData if asset_type is AssetType.TEXTURE else AssetMetaData


@dataclass(eq=False)
class AssetFile:
    """One file of a package, its type and its metadata."""

    asset_type: AssetType = AssetType.EMPTY
    file_path: str = ""
    meta_data: Optional[AssetMetaData] = None
    guid: Guid = field(default_factory=new_guid)

    def __post_init__(self):
        self.asset_type = AssetType(self.asset_type)
        if self.meta_data is None:
            self.meta_data = _metadata_class(self.asset_type)()

    @classmethod
    def from_node(cls, node: Mapping) -> "AssetFile":
        asset_type = AssetType(int(node["AssetType"]))
        return cls(
            asset_type=asset_type,
            file_path=_text(node["FilePath"]),
            meta_data=_metadata_class(asset_type).from_node(node),
            guid=int(node["Guid"]),
        )

    def to_node(self) -> dict:
        node = {
            "Guid": self.guid,
            "AssetType": int(self.asset_type),
            "FilePath": self.file_path,
        }
        return self.meta_data.to_node(node)


@dataclass(eq=False)
class AssetPackage:
    """A set of asset files saved together in one YAML package file."""

    assets: list = field(default_factory=list)
    file_path: str = ""
    guid: Guid = field(default_factory=new_guid)

    def add_asset(self, asset_type: AssetType) -> AssetFile:
        """Create, append and return a new asset file of ``asset_type``."""
        asset_file = AssetFile(asset_type)
        self.assets.append(asset_file)
        return asset_file

    def remove_asset(self, asset_file: Optional[AssetFile]) -> None:
        """Remove ``asset_file``; ValueError if it is not in the package."""
        if asset_file is None:
            return
        self.assets.remove(asset_file)

    def contains_asset(self, asset_file: Optional[AssetFile]) -> bool:
        return any(asset is asset_file for asset in self.assets)

    def to_node(self) -> dict:
        return {"Guid": self.guid, "Assets": [a.to_node() for a in self.assets]}

    def from_node(self, node: Any) -> "AssetPackage":
        """Take the guid from ``node`` and append the assets it lists."""
        if not isinstance(node, Mapping):
            raise ValueError("asset package must be a mapping")
        self.guid = int(node["Guid"])
        self.assets.extend(AssetFile.from_node(n) for n in node.get("Assets") or [])
        return self

    def save(self) -> None:
        """Write the package to its ``file_path``."""
        logger.info("Saving asset package")
        text = yaml.safe_dump(self.to_node(), sort_keys=False)
        with open(self.file_path, "w", encoding="utf-8") as handle:
            handle.write(text)

    def load(self, file_path: str) -> "AssetPackage":
        """Read the package file ``file_path`` into this package."""
        with open(file_path, encoding="utf-8") as handle:
            node = yaml.safe_load(handle)
        self.from_node(node)
        self.file_path = file_path
        return self