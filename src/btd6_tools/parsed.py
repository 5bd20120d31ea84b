"""Mergeable bag of parse results: at most one value per entity kind, plus errors.

A command typically parses each of its options separately and folds the
results together:

    parsed = merge_all([parse_entity(registry, entity), parse_map(registry, map_)])
    if parsed.has_errors():
        ...
    parsed.tower_upgrade   # -> "wizard_monkey#050" or None
"""

from types import MappingProxyType
from typing import Iterable

from btd6_tools.enums import KIND_BY_ATTR, EntityKind
from btd6_tools.errors import ErrorKind, ParseFailure


class Parsed:
    def __init__(self) -> None:
        self._values: dict[EntityKind, object] = {}
        self.errors: list[ParseFailure] = []

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)
        kind = KIND_BY_ATTR.get(name)
        if kind is None:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        return self._values.get(kind)

    @property
    def values(self):
        """Read-only view of the populated kinds."""
        return MappingProxyType(self._values)

    def get(self, kind: EntityKind):
        return self._values.get(kind)

    def set(self, kind: EntityKind, value) -> "Parsed":
        self._values[kind] = value
        return self

    def add_error(
        self,
        error: ParseFailure | str,
        kind: ErrorKind = ErrorKind.NOT_FOUND,
        token: str | None = None,
    ) -> "Parsed":
        if not isinstance(error, ParseFailure):
            error = ParseFailure(kind, str(error), token=token)
        self.errors.append(error)
        return self

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_any(self) -> bool:
        """True if any entity kind is populated."""
        return bool(self._values)

    def error_messages(self) -> list[str]:
        return [e.message for e in self.errors]

    def merge(self, other: "Parsed") -> "Parsed":
        """Combine two results into a new one.

        Equal values are kept, a value on one side only is taken, and two
        different values for the same kind leave it empty and add a CONFLICT
        error. Errors are concatenated (self first), conflicts last.
        """
        merged = Parsed()
        merged.errors = self.errors + other.errors
        for kind in EntityKind:
            mine, theirs = self._values.get(kind), other._values.get(kind)
            if mine is None and theirs is None:
                continue
            if mine is None or theirs is None or mine == theirs:
                merged._values[kind] = mine if mine is not None else theirs
                continue
            merged.errors.append(ParseFailure(
                ErrorKind.CONFLICT,
                f"Conflicting {kind.label} values: {mine!r} and {theirs!r}",
                token=str(theirs),
                expected=(kind,),
            ))
        return merged

    def __eq__(self, other) -> bool:
        if not isinstance(other, Parsed):
            return NotImplemented
        return self._values == other._values and self.errors == other.errors

    def __repr__(self) -> str:
        fields = ", ".join(f"{k.attr}={v!r}" for k, v in self._values.items())
        if self.errors:
            fields = f"{fields}, errors={self.error_messages()!r}" if fields else f"errors={self.error_messages()!r}"
        return f"Parsed({fields})"


def merge_all(results: Iterable[Parsed]) -> Parsed:
    """Fold parse results left to right, starting from an empty Parsed."""
    merged = Parsed()
    for result in results:
        merged = merged.merge(result)
    return merged
