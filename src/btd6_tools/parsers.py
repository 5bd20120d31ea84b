"""Entity parsers: map one canonical token onto an entity kind.

Parsers work on canonical strings, so callers canonicalize through the
AliasRegistry first. Every parser returns either a Match or a ParseFailure;
an expected non-match is never raised.

Typical usage:
    entity_parser = OrParser(
        TowerParser(registry), TowerUpgradeParser(registry), HeroParser(registry)
    )
    entity_parser.parse("wizard_monkey#050")
    # -> Match(kind=EntityKind.TOWER_UPGRADE, value="wizard_monkey#050")

    parse_tokens(["wizard_monkey", "user#chimps_guy"], TowerParser(registry), PersonParser())
    # -> Parsed(tower="wizard_monkey", person="chimps_guy")
"""

from dataclasses import dataclass
from typing import Iterable, Sequence

from btd6_tools.aliases import AliasRegistry
from btd6_tools.enums import EntityKind
from btd6_tools.errors import ErrorKind, InvalidArgumentError, ParseFailure
from btd6_tools.parsed import Parsed

PERSON_PREFIX = "user#"


@dataclass(frozen=True)
class Match:
    kind: EntityKind
    value: object


ParseOutcome = Match | ParseFailure


def _not_found(token, kinds: tuple[EntityKind, ...]) -> ParseFailure:
    expected = "/".join(k.label for k in kinds)
    return ParseFailure(
        ErrorKind.NOT_FOUND,
        f"{token!r} didn't match any permitted {expected}",
        token=token if isinstance(token, str) else str(token),
        expected=kinds,
    )


# ---------------------------------------------------------------------------
# String-set parsers
# ---------------------------------------------------------------------------

class LimitedStringSetValuesParser:
    """Accept a token only if it is one of a permitted subset of known values.

    Args:
        kind: Entity kind reported on a match.
        all_values: Every valid value of this kind.
        permitted_values: Optional restriction; defaults to all values.

    Raises:
        InvalidArgumentError: If a permitted value isn't a valid value.
    """

    def __init__(
        self,
        kind: EntityKind,
        all_values: Iterable[str],
        permitted_values: Iterable[str] | None = None,
    ) -> None:
        self.kind = kind
        known = frozenset(v.lower() for v in all_values)
        permitted = frozenset(v.lower() for v in permitted_values) if permitted_values else None
        if permitted is not None:
            unknown = permitted - known
            if unknown:
                raise InvalidArgumentError(
                    f"Permitted {kind.label} values not recognized: {', '.join(sorted(unknown))}"
                )
        self.values = permitted if permitted is not None else known

    @property
    def kinds(self) -> tuple[EntityKind, ...]:
        return (self.kind,)

    def parse(self, token) -> ParseOutcome:
        if isinstance(token, str):
            value = token.strip().lower()
            if value in self.values:
                return Match(self.kind, value)
        return _not_found(token, self.kinds)


class _RegistryParser:
    kind: EntityKind

    def __init__(self, registry: AliasRegistry, *permitted: str) -> None:
        # Restrictions may be given as aliases ("wiz", "gwen").
        permitted_canonicals = [registry.canonicize_arg(p) or p for p in permitted]
        self.delegate_parser = LimitedStringSetValuesParser(
            self.kind,
            registry.all_of_kind(self.kind),
            permitted_canonicals,
        )

    @property
    def kinds(self) -> tuple[EntityKind, ...]:
        return (self.kind,)

    def parse(self, token) -> ParseOutcome:
        return self.delegate_parser.parse(token)


class TowerParser(_RegistryParser):
    kind = EntityKind.TOWER


class TowerUpgradeParser(_RegistryParser):
    kind = EntityKind.TOWER_UPGRADE


class TowerPathParser(_RegistryParser):
    kind = EntityKind.TOWER_PATH


class HeroParser(_RegistryParser):
    kind = EntityKind.HERO


class MapParser(_RegistryParser):
    kind = EntityKind.MAP


class MapDifficultyParser(_RegistryParser):
    kind = EntityKind.MAP_DIFFICULTY


# ---------------------------------------------------------------------------
# Free-form parsers
# ---------------------------------------------------------------------------

class PersonParser:
    """Accept ``user#<name>`` tokens and yield the lower-cased name."""

    kind = EntityKind.PERSON

    @property
    def kinds(self) -> tuple[EntityKind, ...]:
        return (self.kind,)

    def parse(self, token) -> ParseOutcome:
        if isinstance(token, str) and token.lower().startswith(PERSON_PREFIX):
            name = token[len(PERSON_PREFIX):].strip().lower()
            if name:
                return Match(self.kind, name)
        return _not_found(token, self.kinds)


class NaturalNumberParser:
    """Accept whole numbers in [low, high]; high=None means unbounded."""

    kind = EntityKind.NATURAL_NUMBER

    def __init__(self, low: int = 1, high: int | None = None) -> None:
        self.low = low
        self.high = high

    @property
    def kinds(self) -> tuple[EntityKind, ...]:
        return (self.kind,)

    def parse(self, token) -> ParseOutcome:
        if isinstance(token, bool):
            return _not_found(token, self.kinds)
        if isinstance(token, int):
            number = token
        elif isinstance(token, str) and token.strip().isdigit():
            number = int(token.strip())
        else:
            return _not_found(token, self.kinds)
        if number < self.low or (self.high is not None and number > self.high):
            return ParseFailure(
                ErrorKind.NOT_FOUND,
                f"{number} is outside the range {self.low}-{self.high if self.high is not None else 'inf'}",
                token=str(token),
                expected=self.kinds,
            )
        return Match(self.kind, number)


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------

class OrParser:
    """Try each parser in order; the first match wins.

    Order is priority: a token both a tower and a hero is reported by
    whichever parser comes first.
    """

    def __init__(self, *parsers) -> None:
        if not parsers:
            raise InvalidArgumentError("OrParser needs at least one parser")
        self.parsers = parsers

    @property
    def kinds(self) -> tuple[EntityKind, ...]:
        kinds: list[EntityKind] = []
        for parser in self.parsers:
            kinds.extend(k for k in parser.kinds if k not in kinds)
        return tuple(kinds)

    def parse(self, token) -> ParseOutcome:
        for parser in self.parsers:
            outcome = parser.parse(token)
            if isinstance(outcome, Match):
                return outcome
        return _not_found(token, self.kinds)


PARSERS_BY_KIND = {
    EntityKind.TOWER: TowerParser,
    EntityKind.TOWER_UPGRADE: TowerUpgradeParser,
    EntityKind.TOWER_PATH: TowerPathParser,
    EntityKind.HERO: HeroParser,
    EntityKind.MAP: MapParser,
    EntityKind.MAP_DIFFICULTY: MapDifficultyParser,
    EntityKind.PERSON: PersonParser,
    EntityKind.NATURAL_NUMBER: NaturalNumberParser,
}


def parser_for(kind: EntityKind, registry: AliasRegistry, *permitted: str):
    """Build the parser for ``kind``, restricted to ``permitted`` when given."""
    parser_cls = PARSERS_BY_KIND[kind]
    if issubclass(parser_cls, _RegistryParser):
        return parser_cls(registry, *permitted)
    return parser_cls()


def parse_tokens(tokens: Sequence, *parsers) -> Parsed:
    """Parse tokens positionally against parsers into a single Parsed.

    Each match fills its kind, each failure becomes an error, and two
    tokens of the same kind with different values become a conflict.
    """
    parsed = Parsed()
    if len(tokens) != len(parsers):
        parsed.add_error(
            f"Expected {len(parsers)} argument(s) but got {len(tokens)}",
            kind=ErrorKind.INVALID_ARGUMENT,
        )
    for token, parser in zip(tokens, parsers):
        outcome = parser.parse(token)
        if isinstance(outcome, Match):
            parsed = parsed.merge(Parsed().set(outcome.kind, outcome.value))
        else:
            parsed.add_error(outcome)
    return parsed
