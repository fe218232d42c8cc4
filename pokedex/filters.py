"""Building new Pokedexes from the found Pokemon of an existing one."""

from __future__ import annotations

from typing import Callable, Iterable

from .dex import Entry, Pokedex, PokedexError
from .pokemon import Pokemon, PokemonType

__all__ = ["matches", "pokemon_of_type", "found_pokemon", "search_pokemon"]

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def matches(name: str, text: str) -> bool:
    """Return True if the text is found in the name, ignoring ASCII case.

    The scan never steps back in the name after a partial match fails; it
    only retries the failing character against the start of the text.
    An empty text matches every name.
    """
    name = name.translate(_ASCII_LOWER)
    text = text.translate(_ASCII_LOWER)
    position = 0
    matched = 0
    while position < len(name) and matched < len(text):
        if name[position] == text[matched]:
            position += 1
            matched += 1
        elif matched == 0:
            position += 1
        else:
            matched = 0
    return matched == len(text)


def _copy_found(entries: Iterable[Entry]) -> Pokedex:
    result = Pokedex()
    for entry in entries:
        result.add(entry.pokemon.clone(), found=True)
    return result


def _select(pokedex: Pokedex, keep: Callable[[Pokemon], bool]) -> list[Entry]:
    return [entry for entry in pokedex if entry.found and keep(entry.pokemon)]


def pokemon_of_type(pokedex: Pokedex, kind: PokemonType | int) -> Pokedex:
    """Return a new Pokedex of copies of the found Pokemon having this type."""
    try:
        wanted = PokemonType(kind)
    except ValueError:
        raise PokedexError("Wrong type!") from None
    if wanted in (PokemonType.NONE, PokemonType.INVALID, PokemonType.MAX):
        raise PokedexError("Wrong type!")
    return _copy_found(
        _select(pokedex, lambda p: wanted in (p.type1, p.type2))
    )


def found_pokemon(pokedex: Pokedex) -> Pokedex:
    """Return a new Pokedex of copies of the found Pokemon, by ascending id."""
    chosen = _select(pokedex, lambda p: True)
    return _copy_found(sorted(chosen, key=lambda entry: entry.pokemon_id))


def search_pokemon(pokedex: Pokedex, text: str) -> Pokedex:
    """Return a new Pokedex of copies of the found Pokemon whose name holds text."""
    return _copy_found(_select(pokedex, lambda p: matches(p.name, text)))