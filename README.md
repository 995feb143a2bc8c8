# rosekit

Building blocks for the tooling side of a small 2D game engine: asset
packages, sprite-sheet animation files, project files, a lightweight
reflection system, an event bus and a parent/child tree.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `rosekit.guid` – `new_guid()` returns a random unsigned 64-bit integer.
- `rosekit.paths` – `relative_path(root, path)` (both resolved first),
  `file_extension(file_name)` (with the dot, or `""`) and
  `file_directory(file_name)`.
- `rosekit.reflection` – `TypeInfo(sample, fields, types=None)` describes
  the exposed fields of a class: each field has an `InfoType` (inferred from
  the sample instance by `info_type_of`, or given in `types`) and
  `InfoProps` flags (`SER`, `EDITOR`, `ALL`). `get_var`, `set_var`,
  `get_type`, `get_props` and `var_names` read the description.
  `ReflectionSystem` keeps one `TypeInfo` per class; `add_info` never
  replaces an existing entry.
- `rosekit.serialize` – `default_serialize(info, obj)` returns a dict of the
  fields flagged `SER`; `default_deserialize(info, obj, node)` sets the
  fields present in `node` and leaves the others alone.
- `rosekit.events` – `EventBus` with `listen(event_type, callback)`,
  `emit(event_type, *args, **kwargs)` and `reset()`. Callbacks are matched
  on the exact event class; the event is built only when someone listens,
  and `emit` returns it (or `None`). `Event` is the base class and
  `KeyPressedEvent(key)` a ready-made event.
- `rosekit.tree` – `Node(element, parent=None)` with `add_child`,
  `remove_child` and `delete_children`; a child moved to a new parent is
  detached from its old one.
- `rosekit.asset` – `AssetType` (`EMPTY`, `TEXTURE`, `ANIMATION`,
  `SCRIPT`), `AssetHandle`, `ScriptAsset`, `TextureAsset`,
  `asset_type_name(asset_type)` and `asset_file_type(file)`, which maps
  `.lua`, `.anim`, `.png` and `.jpg` (any case) to an asset type.
- `rosekit.animation` – `Animation`, `Frame`, `AnimationEventData` and
  `Rect`. `Animation.source_rect(frame)` gives the sheet rectangle of a
  frame and raises `IndexError` for a frame out of range.
- `rosekit.animation_io` – the text `.anim` format: `parse_animation`,
  `format_animation`, `load_animation` and `save_animation`.
- `rosekit.package` – `AssetPackage`, a YAML file listing `AssetFile`
  entries with `AssetMetaData` or `TextureMetaData`; `add_asset`,
  `remove_asset`, `contains_asset`, `save` and `load`.
- `rosekit.store` – `AssetStore` loads textures (as Pillow images),
  animations and scripts under string ids, singly or all the entries of a
  package with `load_package`. Loading under a taken id replaces the old
  asset; `get_asset` returns an empty `AssetHandle` for an unknown id, and
  `save_animation` returns `False` when the id holds no animation.
- `rosekit.project` – `Project` lists package and level files, stored
  relative to its `root` (the current directory by default), and a
  `start_level` (-1 when there are no levels). The first level added becomes
  the start level; setting it out of range, or asking `pkg_file` /
  `level_file` for a missing index, raises `IndexError`.
- `rosekit.project_loader` – `ProjectLoader` loads, creates, saves and
  unloads one project at a time, loading the assets of its packages into its
  `asset_store`. It is also a context manager that unloads on exit.

## Example

```python
from rosekit.animation import Animation, Frame
from rosekit.animation_io import format_animation, parse_animation

anim = Animation(32, 32, "hero", is_looping=True)
anim.add_frame(Frame(0, 0.1))
anim.add_frame(Frame(1, 0.1))

text = format_animation(anim)
again = parse_animation(text)
print(again.source_rect(1))  # Rect(x=32, y=0, w=32, h=32)
```

An animation file looks like this:

```
Texture hero
Size 32 32
Loop
Frame 0 0.100000
Frame 1 0.100000
Event Step 0.050000
```

The reader looks for the keywords anywhere in the text: every occurrence of
`Frame` or `Event` starts an entry, and `Loop` anywhere makes the animation
loop, so keep these words out of texture and event names. When writing,
events with an empty name or a name containing `Event` are left out.

A project file is YAML:

```yaml
Packages:
  - Packages/a.pkg
Levels:
  - Level.yaml
StartLevel: 0
```

```python
from rosekit.project_loader import ProjectLoader

with ProjectLoader() as loader:
    project = loader.load_project("game.pro")
    print(project.level_file(0))
```

## What it does not do

rosekit handles files and data only. It opens no window, draws nothing and
runs no game loop: textures are kept as Pillow images, scripts as plain
text that is never executed, and animation events are stored but not
played. There are no file dialogs and no command-line tool.