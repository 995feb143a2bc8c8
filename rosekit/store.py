"""The in-memory store of loaded assets, keyed by asset id."""

import logging
from typing import Iterator

from PIL import Image

from .animation import Animation
from .animation_io import load_animation, save_animation
from .asset import Asset, AssetHandle, AssetType, ScriptAsset, TextureAsset
from .package import AssetPackage

logger = logging.getLogger(__name__)


class AssetStore:
    """Holds loaded textures, animations and scripts under string ids.

    Loading under an id that is already taken replaces the previous asset.
    """

    def __init__(self):
        self._assets: dict[str, AssetHandle] = {}

    def __len__(self) -> int:
        return len(self._assets)

    def __contains__(self, asset_id: object) -> bool:
        return asset_id in self._assets

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._assets))

    def _put(self, asset_id: str, asset_type: AssetType, asset: Asset) -> AssetHandle:
        reloaded = asset_id in self._assets
        handle = AssetHandle(asset_type, asset)
        self._assets[asset_id] = handle
        verb = "Reloaded" if reloaded else "Loaded New"
        logger.info("%s %s Asset %s", verb, asset_type.name.title(), asset_id)
        return handle

    def unload_all_assets(self) -> None:
        """Forget every loaded asset."""
        self._assets.clear()

    def add_texture(self, asset_id: str, file_path: str, ppu: int = 100) -> AssetHandle:
        """Load the image ``file_path`` as a texture under ``asset_id``."""
        with Image.open(file_path) as image:
            image.load()
            texture = image.copy()
        return self._put(asset_id, AssetType.TEXTURE, TextureAsset(texture, ppu))

    def load_animation(self, asset_id: str, file_path: str) -> AssetHandle:
        """Load the ``.anim`` file ``file_path`` under ``asset_id``."""
        return self._put(asset_id, AssetType.ANIMATION, load_animation(file_path))

    def load_script(self, asset_id: str, file_path: str) -> AssetHandle:
        """Load the text of the script ``file_path`` under ``asset_id``."""
        with open(file_path, encoding="utf-8", newline="") as handle:
            script = handle.read()
        return self._put(asset_id, AssetType.SCRIPT, ScriptAsset(script))

    def get_asset(self, asset_id: str) -> AssetHandle:
        """Return the handle stored under ``asset_id``, or an empty handle."""
        return self._assets.get(asset_id, AssetHandle())

    def get_assets_of_type(self, asset_type: AssetType) -> list:
        """Return ``(asset_id, handle)`` pairs of one type, ordered by id."""
        return [
            (asset_id, handle)
            for asset_id, handle in sorted(self._assets.items())
            if handle.type == asset_type
        ]

    def load_package(self, file_path: str) -> None:
        """Load every asset listed in the package file ``file_path``."""
        package = AssetPackage().load(file_path)
        for asset_file in package.assets:
            meta = asset_file.meta_data
            if asset_file.asset_type is AssetType.TEXTURE:
                self.add_texture(meta.name, asset_file.file_path, meta.ppu)
            elif asset_file.asset_type is AssetType.SCRIPT:
                self.load_script(meta.name, asset_file.file_path)
            elif asset_file.asset_type is AssetType.ANIMATION:
                self.load_animation(meta.name, asset_file.file_path)

    def new_animation(self, asset_id: str) -> AssetHandle:
        """Create an empty 32x32 animation under ``asset_id`` and return its handle."""
        handle = AssetHandle(AssetType.ANIMATION, Animation(32, 32, "", False))
        self._assets[asset_id] = handle
        logger.info("Created new Animation Asset %s", asset_id)
        return handle

    def save_animation(self, asset_id: str, file_path: str) -> bool:
        """Write the animation ``asset_id`` to ``file_path``.

        Returns False, writing nothing, when no animation has that id.
        """
        asset = self.get_asset(asset_id).asset
        if not isinstance(asset, Animation):
            return False
        save_animation(asset, file_path)
        return True