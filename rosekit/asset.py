"""Asset kinds, handles and the simple payload types held by the asset store."""

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

from .paths import file_extension

logger = logging.getLogger(__name__)


class AssetType(IntEnum):
    """Kinds of asset; the integer values are what package files store."""

    EMPTY = 0
    TEXTURE = 1
    ANIMATION = 2
    SCRIPT = 3


_TYPE_NAMES = {
    AssetType.EMPTY: "None",
    AssetType.TEXTURE: "Texture",
    AssetType.ANIMATION: "Animation",
    AssetType.SCRIPT: "Script",
}

_EXTENSION_TYPES = {
    ".lua": AssetType.SCRIPT,
    ".anim": AssetType.ANIMATION,
    ".png": AssetType.TEXTURE,
    ".jpg": AssetType.TEXTURE,
}


class Asset:
    """Base class for loaded asset payloads."""


@dataclass(frozen=True)
class ScriptAsset(Asset):
    """The source text of a script."""

    script: str


@dataclass(frozen=True)
class TextureAsset(Asset):
    """A loaded image together with its pixels-per-unit scale."""

    texture: Any
    ppu: int = 100


@dataclass
class AssetHandle:
    """A typed reference to a loaded asset; empty when nothing is loaded."""

    type: AssetType = AssetType.EMPTY
    asset: Optional[Asset] = None


def asset_type_name(asset_type: Any) -> str:
    """Return the display name of ``asset_type``, or ``"Unknown"``."""
    try:
        return _TYPE_NAMES[AssetType(asset_type)]
    except ValueError:
        return "Unknown"


def asset_file_type(file: str) -> AssetType:
    """Guess the asset type of ``file`` from its extension, ignoring case."""
    return _EXTENSION_TYPES.get(file_extension(file).lower(), AssetType.EMPTY)