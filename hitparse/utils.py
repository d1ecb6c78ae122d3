from __future__ import annotations

from typing import Any, Callable, Generic, Sequence, TypeVar, cast, overload

from .errors import FormatError, MissingFieldError


_OwnerT = TypeVar("_OwnerT")
_ValueT = TypeVar("_ValueT")


class lazyval(Generic[_OwnerT, _ValueT]):
    """Decorator to lazily compute and cache a value."""

    def __init__(self, fget: Callable[[_OwnerT], _ValueT]):
        self._fget = fget
        self._name: str | None = None
        self.__doc__ = fget.__doc__

    def __set_name__(self, owner: type[_OwnerT], name: str) -> None:
        self._name = name

    @overload
    def __get__(self, instance: None, owner: type[_OwnerT]) -> "lazyval[_OwnerT, _ValueT]":
        ...

    @overload
    def __get__(self, instance: _OwnerT, owner: type[_OwnerT]) -> _ValueT:
        ...

    def __get__(
        self,
        instance: _OwnerT | None,
        owner: type[_OwnerT],
    ) -> _ValueT | "lazyval[_OwnerT, _ValueT]":
        if instance is None:
            return self

        if self._name is None:
            raise AttributeError("lazyval descriptor is missing attribute name")

        value = self._fget(instance)
        vars(instance)[self._name] = value
        return value


class no_default:
    """Sentinel type; this should not be instantiated.

    This type is used so functions can tell the difference between no argument
    passed and an explicit value passed even if ``None`` is a valid value.
    """

    def __new__(cls) -> "no_default":  # pragma: no cover - construction forbidden
        raise TypeError("cannot create instances of sentinel type")


NoDefaultType = type[no_default]


def get_field(
    fields: Sequence[str],
    ix: int,
    name: str,
    default: str | None | NoDefaultType = no_default,
) -> str | None:
    """Fetch a positional field, raising :class:`MissingFieldError` when it is
    absent and no default was given.
    """
    try:
        return fields[ix]
    except IndexError:
        if default is no_default:
            raise MissingFieldError(
                f"missing {name} (field {ix}), got only {len(fields)} fields",
            ) from None
        return cast("str | None", default)


def _check_legacy_digits(name: str, raw: str, kind: str) -> None:
    # the legacy parsers reject digit separators and non-ASCII digits
    if "_" in raw or not raw.isascii():
        raise FormatError(f"{name} should be {kind}, got {raw!r}")


def parse_int(name: str, raw: str) -> int:
    _check_legacy_digits(name, raw, "an int")
    try:
        return int(raw)
    except ValueError as e:
        raise FormatError(f"{name} should be an int, got {raw!r}") from e


def parse_float(name: str, raw: str) -> float:
    _check_legacy_digits(name, raw, "a float")
    # float() never consults the locale so '.' is always the separator
    try:
        return float(raw)
    except ValueError as e:
        raise FormatError(f"{name} should be a float, got {raw!r}") from e


def pack_float(float_in: Any) -> str:
    """Pack a number to a string, dropping the fraction when it is zero,
    as the osu! client does.
    """
    int_ = int(float_in)
    return str(int_) if int_ == float_in else str(float_in)
