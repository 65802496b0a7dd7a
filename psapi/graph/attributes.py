"""Attribute storage backing every resource."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

Scalar = str | int | float

MISSING: Any = object()


@dataclass(frozen=True, slots=True)
class AttributeNotFound:
    """Returned in place of a value when a resource lacks the requested attribute."""

    name: str
    kind: str

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"PopShops API Error: {self.kind} has no attribute {self.name!r}"


def is_scalar(value: Any) -> bool:
    # bool is an int subclass but never a plain JSON scalar here
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


class AttributeBag:
    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._values: dict[str, Scalar] = {}

    def set(self, name: str, value: Scalar) -> None:
        self._values[name] = value

    def get(self, name: str, default: Any = MISSING) -> Scalar | AttributeNotFound | Any:
        try:
            return self._values[name]
        except KeyError:
            if default is not MISSING:
                return default
            return AttributeNotFound(name=name, kind=self.kind)

    def names(self) -> list[str]:
        return list(self._values)

    def as_dict(self) -> dict[str, Scalar]:
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)
