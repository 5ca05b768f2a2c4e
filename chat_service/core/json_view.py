# chat_service/core/json_view.py
"""
Read-only, schema-keyed view over a parsed JSON document.

A view is scoped to one nesting level and addressed by the members of a
key schema (a str-valued Enum, see chat_service.core.keys) rather than by
raw paths. Plugins declare only the keys they care about and never need to
agree on a single response model.

Usage:
    from chat_service.core import keys
    from chat_service.core.json_view import JSONView

    view = JSONView.from_bytes(raw, keys.Root)
    choices = view.array(keys.Root.CHOICES, keyed=keys.Choices) or []
    message = choices[0].object(keys.Choices.MESSAGE, keyed=keys.Message)
    content = message.get(keys.Message.CONTENT, as_=str)

Lookups never raise for absence; `require` is the only lookup that fails,
with MissingFieldError. Malformed JSON is reported once, by from_bytes.
"""

from __future__ import annotations

import copy
import json
from enum import Enum
from functools import lru_cache
from typing import Any, Generic, List, Optional, Type, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from chat_service.core.exceptions import MalformedResponseError, MissingFieldError

K = TypeVar("K", bound=Enum)
C = TypeVar("C", bound=Enum)
T = TypeVar("T")


@lru_cache(maxsize=64)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"invalid JSON constant {name!r}")


def _decode(value: Any, as_: Type[T]) -> Optional[T]:
    """Strictly decode a raw JSON value to `as_`, or None if it does not fit."""
    if value is None:
        return None
    try:
        return _adapter(as_).validate_python(value, strict=True)
    except ValidationError:
        return None


class JSONView(Generic[K]):
    """
    A view over one JSON object, keyed by the schema `K`.

    The view holds a reference to the parsed document; it never copies or
    mutates it. Construct it from parsed data or via from_bytes().
    """

    __slots__ = ("_data", "_schema")

    def __init__(self, data: Any, schema: Type[K]):
        self._data = data
        self._schema = schema

    @classmethod
    def from_bytes(cls, raw: Union[bytes, str], schema: Type[K]) -> "JSONView[K]":
        """
        Parse a response body and wrap it.

        Raises:
            MalformedResponseError: If the body is empty or not valid JSON
        """
        if not raw:
            raise MalformedResponseError("Malformed Response: empty body", body=b"")
        try:
            data = json.loads(raw, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            body = raw.encode("utf-8") if isinstance(raw, str) else raw
            raise MalformedResponseError(f"Malformed Response: {exc}", body=body) from exc
        return cls(data, schema)

    @property
    def schema(self) -> Type[K]:
        return self._schema

    @property
    def raw(self) -> Any:
        """Deep copy of the scoped JSON value, for diagnostics."""
        return copy.deepcopy(self._data)

    def keys(self) -> List[K]:
        """Schema members present at this level."""
        if not isinstance(self._data, dict):
            return []
        return [member for member in self._schema if member.value in self._data]

    def __contains__(self, key: Any) -> bool:
        return self._lookup(key) is not None

    def __repr__(self) -> str:
        return f"JSONView[{self._schema.__name__}]({[k.value for k in self.keys()]})"

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get(self, key: Union[K, str], as_: Type[T] = str) -> Optional[T]:  # type: ignore[assignment]
        """Return the value at `key` decoded to `as_`, or None."""
        return _decode(self._lookup(key), as_)

    def require(self, key: Union[K, str], as_: Type[T] = str) -> T:  # type: ignore[assignment]
        """
        Same as get(), for contractually mandatory fields.

        Raises:
            MissingFieldError: If the field is missing or not decodable to `as_`
        """
        value = self.get(key, as_)
        if value is None:
            raise MissingFieldError(self._key(key).value)
        return value

    def object(self, key: Union[K, str], keyed: Type[C]) -> Optional["JSONView[C]"]:
        """Return the nested object at `key` re-scoped to `keyed`, or None."""
        value = self._lookup(key)
        if not isinstance(value, dict):
            return None
        return JSONView(value, keyed)

    def array(self, key: Union[K, str], keyed: Type[C]) -> Optional[List["JSONView[C]"]]:
        """Return one view per element of the array at `key`, or None."""
        value = self._lookup(key)
        if not isinstance(value, list):
            return None
        return [JSONView(item, keyed) for item in value]

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _key(self, key: Union[K, str]) -> K:
        try:
            return self._schema(key)
        except ValueError:
            raise TypeError(
                f"{key!r} is not a key of {self._schema.__name__}; "
                f"expected one of {[m.value for m in self._schema]}"
            ) from None

    def _lookup(self, key: Union[K, str]) -> Any:
        member = self._key(key)
        if not isinstance(self._data, dict):
            return None
        return self._data.get(member.value)


__all__ = ["JSONView"]
