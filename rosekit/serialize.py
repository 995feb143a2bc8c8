"""Reading and writing reflected fields to and from mapping nodes."""

from collections.abc import Mapping
from typing import Any, Callable, Optional

from .reflection import InfoProps, InfoType, TypeInfo


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


_SCALARS: dict[InfoType, Callable[[Any], Any]] = {
    InfoType.STRING: str,
    InfoType.INT: int,
    InfoType.BOOL: _to_bool,
    InfoType.FLOAT: float,
    InfoType.GUID: int,
}


def _vec_components(value: Any) -> tuple:
    if hasattr(value, "x") and hasattr(value, "y"):
        return value.x, value.y
    return value[0], value[1]


def _serialised_fields(info: TypeInfo):
    for name in info.var_names:
        if info.get_props(name) & InfoProps.SER:
            yield name, info.get_type(name)


def default_serialize(info: TypeInfo, obj: Any) -> dict:
    """Return a mapping of the serialisable fields of ``obj``."""
    node: dict = {}
    for name, var_type in _serialised_fields(info):
        value = info.get_var(obj, name)
        if var_type in _SCALARS:
            node[name] = _SCALARS[var_type](value)
        elif var_type is InfoType.VEC2:
            x, y = _vec_components(value)
            node[name] = [float(x), float(y)]
    return node


def default_deserialize(info: TypeInfo, obj: Any, node: Optional[Mapping]) -> Any:
    """Set the serialisable fields of ``obj`` found in ``node``; return ``obj``.

    Fields absent from ``node`` keep their current values.
    """
    if node is None:
        node = {}
    if not isinstance(node, Mapping):
        raise TypeError(f"expected a mapping node, got {type(node).__name__}")
    for name, var_type in _serialised_fields(info):
        if name not in node:
            continue
        raw = node[name]
        if var_type in _SCALARS:
            info.set_var(obj, name, _SCALARS[var_type](raw))
        elif var_type is InfoType.VEC2:
            info.set_var(obj, name, (float(raw[0]), float(raw[1])))
    return obj