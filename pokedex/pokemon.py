"""Pokemon records and the type table."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "PokemonError",
    "PokemonType",
    "Pokemon",
    "valid_name",
    "type_from_string",
    "type_to_string",
]


class PokemonError(ValueError):
    """Raised when a Pokemon or a type is given invalid values."""


class PokemonType(IntEnum):
    """The kinds of Pokemon, with INVALID and MAX marking the ends."""

    INVALID = -1
    NONE = 0
    NORMAL = 1
    FIRE = 2
    FIGHTING = 3
    WATER = 4
    FLYING = 5
    GRASS = 6
    POISON = 7
    ELECTRIC = 8
    GROUND = 9
    PSYCHIC = 10
    ROCK = 11
    ICE = 12
    BUG = 13
    DRAGON = 14
    GHOST = 15
    DARK = 16
    STEEL = 17
    FAIRY = 18
    MAX = 19

    @property
    def is_valid(self) -> bool:
        """True for NONE and every real type; False for INVALID and MAX."""
        return PokemonType.INVALID < self < PokemonType.MAX


_TYPE_NAMES: dict[PokemonType, str] = {
    PokemonType.NONE: "None",
    PokemonType.NORMAL: "Normal",
    PokemonType.FIRE: "Fire",
    PokemonType.FIGHTING: "Fighting",
    PokemonType.WATER: "Water",
    PokemonType.FLYING: "Flying",
    PokemonType.GRASS: "Grass",
    PokemonType.POISON: "Poison",
    PokemonType.ELECTRIC: "Electric",
    PokemonType.GROUND: "Ground",
    PokemonType.PSYCHIC: "Psychic",
    PokemonType.ROCK: "Rock",
    PokemonType.ICE: "Ice",
    PokemonType.BUG: "Bug",
    PokemonType.DRAGON: "Dragon",
    PokemonType.GHOST: "Ghost",
    PokemonType.DARK: "Dark",
    PokemonType.STEEL: "Steel",
    PokemonType.FAIRY: "Fairy",
}

_NAME_CHARACTERS = frozenset(string.ascii_letters + " -")


def valid_name(name: str) -> bool:
    """Return True if the name holds only letters, spaces and dashes."""
    return all(ch in _NAME_CHARACTERS for ch in name)


def type_from_string(text: str) -> PokemonType:
    """Look a type up by name, ignoring case; INVALID if there is none."""
    wanted = text.lower()
    for kind, name in _TYPE_NAMES.items():
        if name.lower() == wanted:
            return kind
    return PokemonType.INVALID


def type_to_string(kind: PokemonType | int) -> str:
    """Return the display name of a type."""
    try:
        return _TYPE_NAMES[PokemonType(kind)]
    except (ValueError, KeyError):
        raise PokemonError(f"invalid pokemon type: {kind!r}") from None


def _as_type(value: PokemonType | int, label: str) -> PokemonType:
    try:
        kind = PokemonType(value)
    except ValueError:
        raise PokemonError(f"{label} is invalid") from None
    if not kind.is_valid:
        raise PokemonError(f"{label} is invalid")
    return kind


@dataclass(frozen=True)
class Pokemon:
    """An immutable Pokemon: id, name, height (m), weight (kg) and types."""

    pokemon_id: int
    name: str
    height: float
    weight: float
    type1: PokemonType
    type2: PokemonType = PokemonType.NONE

    def __post_init__(self) -> None:
        if self.pokemon_id < 0:
            raise PokemonError("invalid pokemon_id")
        type1 = _as_type(self.type1, "type1")
        type2 = _as_type(self.type2, "type2")
        if type1 is PokemonType.NONE:
            raise PokemonError("type1 is NONE_TYPE")
        if type1 is type2:
            raise PokemonError("type1 and type2 must be different")
        object.__setattr__(self, "type1", type1)
        object.__setattr__(self, "type2", type2)

    @property
    def types(self) -> tuple[PokemonType, ...]:
        """The Pokemon's types, without NONE."""
        if self.type2 is PokemonType.NONE:
            return (self.type1,)
        return (self.type1, self.type2)

    def clone(self) -> Pokemon:
        """Return a separate Pokemon with the same attributes."""
        return Pokemon(
            self.pokemon_id,
            self.name,
            self.height,
            self.weight,
            self.type1,
            self.type2,
        )