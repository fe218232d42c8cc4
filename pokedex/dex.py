"""An ordered Pokedex with a cursor, found flags and evolution links."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .crandom import CRandom
from .pokemon import Pokemon

__all__ = ["PokedexError", "Entry", "Pokedex"]


class PokedexError(Exception):
    """Raised when an operation on a Pokedex cannot be carried out."""


@dataclass(eq=False)
class Entry:
    """One Pokemon held in a Pokedex, with its found flag and evolution."""

    pokemon: Pokemon
    found: bool = False
    evolution: Entry | None = None

    @property
    def pokemon_id(self) -> int:
        return self.pokemon.pokemon_id


class Pokedex:
    """Pokemon kept in insertion order, with one currently selected."""

    def __init__(self) -> None:
        self._entries: list[Entry] = []
        self._current: int | None = None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def _find(self, pokemon_id: int) -> Entry | None:
        return next(
            (entry for entry in self._entries if entry.pokemon_id == pokemon_id),
            None,
        )

    def add(self, pokemon: Pokemon, found: bool = False) -> Entry:
        """Append a Pokemon; the first one added becomes the current one."""
        if self._find(pokemon.pokemon_id) is not None:
            raise PokedexError(
                f"a Pokemon with id {pokemon.pokemon_id} is already in the Pokedex"
            )
        entry = Entry(pokemon, found)
        self._entries.append(entry)
        if self._current is None:
            self._current = 0
        return entry

    def entries(self) -> list[Entry]:
        """Return the entries in the order they were added."""
        return list(self._entries)

    def current_entry(self) -> Entry:
        """Return the entry of the currently selected Pokemon."""
        if self._current is None:
            raise PokedexError("Pokedex is empty.")
        return self._entries[self._current]

    def current(self) -> Pokemon:
        """Return the currently selected Pokemon."""
        if self._current is None:
            raise PokedexError("No currently selected pokemon.")
        return self._entries[self._current].pokemon

    def find_current(self) -> None:
        """Mark the current Pokemon as found; nothing happens when empty."""
        if self._current is not None:
            self._entries[self._current].found = True

    def select_next(self) -> None:
        """Move the cursor forward, staying put at the end."""
        if self._current is not None and self._current + 1 < len(self._entries):
            self._current += 1

    def select_prev(self) -> None:
        """Move the cursor back, staying put at the start."""
        if self._current is not None and self._current > 0:
            self._current -= 1

    def select(self, pokemon_id: int) -> None:
        """Select the Pokemon with this id; nothing happens if there is none."""
        for position, entry in enumerate(self._entries):
            if entry.pokemon_id == pokemon_id:
                self._current = position
                return

    def remove_current(self) -> None:
        """Remove the current Pokemon.

        The one after it becomes current, or the one before it if it was
        last; an emptied Pokedex has no current Pokemon.
        """
        if self._current is None:
            return
        removed = self._entries.pop(self._current)
        for entry in self._entries:
            if entry.evolution is removed:
                entry.evolution = None
        if not self._entries:
            self._current = None
        elif self._current >= len(self._entries):
            self._current = len(self._entries) - 1

    def explore(self, seed: int, factor: int, how_many: int) -> None:
        """Encounter how_many random ids below factor, marking matches found."""
        if not any(entry.pokemon_id <= factor - 1 for entry in self._entries):
            raise PokedexError("Factor is too small to explore any Pokemon")
        generator = CRandom(seed)
        for _ in range(how_many):
            encountered = generator.rand() % factor
            for entry in self._entries:
                if entry.pokemon_id == encountered:
                    entry.found = True

    def count_found(self) -> int:
        """Return how many Pokemon have been found."""
        return sum(1 for entry in self._entries if entry.found)

    def count_total(self) -> int:
        """Return how many Pokemon the Pokedex holds."""
        return len(self._entries)

    def add_evolution(self, from_id: int, to_id: int) -> None:
        """Record that from_id evolves into to_id, replacing any earlier link."""
        source = self._find(from_id)
        target = self._find(to_id)
        if from_id == to_id or source is None or target is None:
            raise PokedexError("Evolution fail.")
        source.evolution = target

    def next_evolution(self) -> int | None:
        """Return the id the current Pokemon evolves into, or None."""
        if self._current is None:
            raise PokedexError("Pokedex is empty.")
        evolution = self._entries[self._current].evolution
        return None if evolution is None else evolution.pokemon_id

    def evolution_chain(self) -> list[Entry]:
        """Return the current entry followed by its successive evolutions.

        The chain stops before any entry that would repeat.
        """
        chain: list[Entry] = []
        seen: set[int] = set()
        entry: Entry | None = self.current_entry()
        while entry is not None and id(entry) not in seen:
            seen.add(id(entry))
            chain.append(entry)
            entry = entry.evolution
        return chain