import dataclasses

import pytest

from rosekit.asset import (
    AssetHandle,
    AssetType,
    ScriptAsset,
    TextureAsset,
    asset_file_type,
    asset_type_name,
)


@pytest.mark.parametrize(
    "asset_type, name",
    [
        (AssetType.EMPTY, "None"),
        (AssetType.TEXTURE, "Texture"),
        (AssetType.ANIMATION, "Animation"),
        (AssetType.SCRIPT, "Script"),
    ],
)
def test_asset_type_name(asset_type, name):
    assert asset_type_name(asset_type) == name


def test_asset_type_name_unknown():
    assert asset_type_name(99) == "Unknown"


def test_asset_type_name_accepts_stored_integer():
    assert asset_type_name(int(AssetType.SCRIPT)) == "Script"


@pytest.mark.parametrize(
    "file, expected",
    [
        ("scripts/player.lua", AssetType.SCRIPT),
        ("scripts/PLAYER.LUA", AssetType.SCRIPT),
        ("anims/walk.anim", AssetType.ANIMATION),
        ("images/hero.png", AssetType.TEXTURE),
        ("images/hero.JPG", AssetType.TEXTURE),
        ("notes.txt", AssetType.EMPTY),
        ("noextension", AssetType.EMPTY),
    ],
)
def test_asset_file_type(file, expected):
    assert asset_file_type(file) is expected


def test_asset_handle_defaults_to_empty():
    handle = AssetHandle()
    assert handle.type is AssetType.EMPTY
    assert handle.asset is None


def test_asset_handle_holds_asset():
    script = ScriptAsset("print(1)")
    handle = AssetHandle(AssetType.SCRIPT, script)
    assert handle.asset.script == "print(1)"


def test_texture_asset_default_ppu():
    assert TextureAsset(texture=None).ppu == 100


def test_texture_asset_ppu_is_fixed():
    texture = TextureAsset(texture=None, ppu=32)
    with pytest.raises(dataclasses.FrozenInstanceError):
        texture.ppu = 64
    assert texture.ppu == 32