"""
Shared building blocks for the schema models: the response envelope and small decode helpers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def optional_enum(enum_cls: type[E], value: Any) -> E | None:
    """Decode an enum field the API may omit; unknown values still raise ValueError."""
    if value is None:
        return None
    return enum_cls(value)


def decode_list(decode: Callable[[dict[str, Any]], T], items: list[dict[str, Any]] | None) -> list[T]:
    return [decode(item) for item in (items or [])]


@dataclass
class Meta:
    total: int
    page: int
    limit: int

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Meta":
        return Meta(total=d["total"], page=d["page"], limit=d["limit"])


@dataclass
class ApiResponse(Generic[T]):
    """Success envelope: {data, meta?}."""

    data: T
    meta: Meta | None = None
