"""Error kinds, tagged parse failures, and precondition exceptions.

Expected non-matches (a token that doesn't canonicalize, a value outside a
parser's restriction set, two options naming different towers) are returned
as ParseFailure values and collected on Parsed. Structurally invalid
arguments to the codec or cost calculator raise one of the ValueError
subclasses below; a malformed corpus or cost table raises at load time.
"""

from dataclasses import dataclass, field
from enum import Enum

from btd6_tools.enums import EntityKind


class ErrorKind(Enum):
    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    CONFLICT = "conflict"
    UNKNOWN_TOWER = "unknown_tower"
    INVALID_UPGRADE_SET = "invalid_upgrade_set"


@dataclass(frozen=True)
class ParseFailure:
    """A token that didn't resolve to any permitted entity.

    Attributes:
        kind: Why the parse failed.
        message: User-facing description.
        token: The offending input, if any.
        expected: Entity kinds the parser(s) would have accepted.
    """

    kind: ErrorKind
    message: str
    token: str | None = None
    expected: tuple[EntityKind, ...] = field(default=())

    def __str__(self) -> str:
        return self.message


class Btd6ToolsError(ValueError):
    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT


class InvalidArgumentError(Btd6ToolsError):
    kind = ErrorKind.INVALID_ARGUMENT


class UnknownTowerError(Btd6ToolsError):
    kind = ErrorKind.UNKNOWN_TOWER


class InvalidUpgradeSetError(Btd6ToolsError):
    kind = ErrorKind.INVALID_UPGRADE_SET


class CostTableError(Btd6ToolsError):
    """Cost table data doesn't match the expected shape."""


class CorpusError(Btd6ToolsError):
    """Alias corpus is malformed (duplicate canonical, empty alias list...)."""
