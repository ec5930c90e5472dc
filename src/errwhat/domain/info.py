from __future__ import annotations

import numbers
import operator
from collections.abc import Iterable
from enum import Enum
from typing import Any, Callable, SupportsIndex

from pydantic import BaseModel, ConfigDict, model_validator

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1


class ConfiguredBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class InfoKind(str, Enum):
    BOOL = "bool"
    INT = "int64"
    UINT = "uint64"
    FLOAT = "float64"
    STRING = "string"
    BOOL_LIST = "[]bool"
    INT_LIST = "[]int64"
    UINT_LIST = "[]uint64"
    FLOAT_LIST = "[]float64"
    STRING_LIST = "[]string"

    @property
    def is_sequence(self) -> bool:
        return self.value.startswith("[]")

    @property
    def scalar(self) -> InfoKind:
        """Return the element kind, e.g. ``INT`` for ``INT_LIST``."""
        return InfoKind(self.value.removeprefix("[]"))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


_SCALAR_CHECKS: dict[InfoKind, Callable[[Any], bool]] = {
    InfoKind.BOOL: lambda v: isinstance(v, bool),
    InfoKind.INT: lambda v: _is_int(v) and INT64_MIN <= v <= INT64_MAX,
    InfoKind.UINT: lambda v: _is_int(v) and 0 <= v <= UINT64_MAX,
    InfoKind.FLOAT: lambda v: isinstance(v, float),
    InfoKind.STRING: lambda v: isinstance(v, str),
}


class InfoEntry(ConfiguredBaseModel):
    """A single typed key/value diagnostic fact.

    ``value`` always holds exactly the representation declared by ``kind``;
    sequence kinds store a tuple. Build entries with the ``*_info``
    constructors below rather than by hand.
    """

    key: str
    kind: InfoKind
    value: Any

    @model_validator(mode="after")
    def _check_value(self) -> InfoEntry:
        check = _SCALAR_CHECKS[self.kind.scalar]
        if self.kind.is_sequence:
            ok = isinstance(self.value, tuple) and all(map(check, self.value))
        else:
            ok = check(self.value)
        if not ok:
            raise ValueError(
                f"value {self.value!r} is not representable as {self.kind.value}"
            )
        return self


def _widen_float(value: Any) -> Any:
    # only real numbers widen; anything else is left for the validator to reject
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return float(value)
    return value


def bool_info(key: str, value: bool) -> InfoEntry:
    return InfoEntry(key=key, kind=InfoKind.BOOL, value=value)


def bool_list_info(key: str, value: Iterable[bool]) -> InfoEntry:
    return InfoEntry(key=key, kind=InfoKind.BOOL_LIST, value=tuple(value))


def int_info(key: str, value: SupportsIndex) -> InfoEntry:
    """Widen any integer-like *value* to a signed 64-bit entry."""
    return InfoEntry(key=key, kind=InfoKind.INT, value=operator.index(value))


def int_list_info(key: str, value: Iterable[SupportsIndex]) -> InfoEntry:
    return InfoEntry(
        key=key,
        kind=InfoKind.INT_LIST,
        value=tuple(operator.index(v) for v in value),
    )


def uint_info(key: str, value: SupportsIndex) -> InfoEntry:
    """Widen any non-negative integer-like *value* to an unsigned 64-bit entry."""
    return InfoEntry(key=key, kind=InfoKind.UINT, value=operator.index(value))


def uint_list_info(key: str, value: Iterable[SupportsIndex]) -> InfoEntry:
    return InfoEntry(
        key=key,
        kind=InfoKind.UINT_LIST,
        value=tuple(operator.index(v) for v in value),
    )


def float_info(key: str, value: float) -> InfoEntry:
    return InfoEntry(key=key, kind=InfoKind.FLOAT, value=_widen_float(value))


def float_list_info(key: str, value: Iterable[float]) -> InfoEntry:
    return InfoEntry(
        key=key, kind=InfoKind.FLOAT_LIST, value=tuple(map(_widen_float, value))
    )


def str_info(key: str, value: str) -> InfoEntry:
    return InfoEntry(key=key, kind=InfoKind.STRING, value=value)


def str_list_info(key: str, value: Iterable[str]) -> InfoEntry:
    return InfoEntry(key=key, kind=InfoKind.STRING_LIST, value=tuple(value))
