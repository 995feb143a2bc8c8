"""Field descriptions for objects whose variables are serialised or edited."""

from dataclasses import dataclass
from enum import Enum, IntFlag, auto
from numbers import Real
from typing import Any, Iterable, Mapping, Optional, Union


class InfoType(Enum):
    """Kinds of value a described field can hold."""

    INT = auto()
    BOOL = auto()
    STRING = auto()
    COLOR = auto()
    FLOAT = auto()
    VEC2 = auto()
    GUID = auto()
    UNKNOWN = auto()


class InfoProps(IntFlag):
    """What a described field takes part in."""

    NONE = 0
    SER = 1 << 0
    EDITOR = 1 << 1
    ALL = SER | EDITOR


def info_type_of(value: Any) -> InfoType:
    """Guess the field kind of ``value``.

    Identifiers are plain integers, so GUID fields must be declared explicitly.
    """
    if isinstance(value, bool):
        return InfoType.BOOL
    if isinstance(value, int):
        return InfoType.INT
    if isinstance(value, float):
        return InfoType.FLOAT
    if isinstance(value, str):
        return InfoType.STRING
    if isinstance(value, (tuple, list)) and all(
        isinstance(v, Real) and not isinstance(v, bool) for v in value
    ):
        if len(value) == 2:
            return InfoType.VEC2
        if len(value) == 4:
            return InfoType.COLOR
    return InfoType.UNKNOWN


@dataclass(frozen=True)
class _Var:
    type: InfoType
    props: InfoProps


FieldSpec = Union[str, tuple]


class TypeInfo:
    """Ordered description of the exposed variables of one class.

    ``sample`` is a default instance used to infer field kinds. Each entry of
    ``fields`` is a name or a ``(name, props)`` pair; ``types`` overrides the
    inferred kind for chosen names.
    """

    def __init__(
        self,
        sample: Any,
        fields: Iterable[FieldSpec],
        types: Optional[Mapping[str, InfoType]] = None,
    ):
        overrides = dict(types or {})
        self._vars: dict[str, _Var] = {}
        for entry in fields:
            if isinstance(entry, str):
                name, props = entry, InfoProps.ALL
            else:
                name, props = entry
            if not hasattr(sample, name):
                raise AttributeError(f"{type(sample).__name__} has no field {name!r}")
            if name in overrides:
                var_type = overrides[name]
            else:
                var_type = info_type_of(getattr(sample, name))
            self._vars[name] = _Var(var_type, InfoProps(props))

    @property
    def var_names(self) -> tuple:
        """Names of the described variables in declaration order."""
        return tuple(self._vars)

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def get_var(self, obj: Any, name: str) -> Any:
        """Return the value of field ``name`` on ``obj``, or None if undescribed."""
        if name not in self._vars:
            return None
        return getattr(obj, name)

    def set_var(self, obj: Any, name: str, value: Any) -> None:
        """Set field ``name`` on ``obj``; raise KeyError if undescribed."""
        if name not in self._vars:
            raise KeyError(name)
        setattr(obj, name, value)

    def get_type(self, name: str) -> InfoType:
        var = self._vars.get(name)
        return var.type if var else InfoType.UNKNOWN

    def get_props(self, name: str) -> InfoProps:
        var = self._vars.get(name)
        return var.props if var else InfoProps.NONE


class ReflectionSystem:
    """Registry of type descriptions keyed by class."""

    def __init__(self):
        self._infos: dict[type, TypeInfo] = {}

    def add_info(self, cls: type, info: TypeInfo) -> None:
        """Register ``info`` for ``cls`` unless one is already registered."""
        self._infos.setdefault(cls, info)

    def get_info(self, cls: type) -> Optional[TypeInfo]:
        return self._infos.get(cls)