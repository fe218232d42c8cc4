"""Text renderings of a Pokedex: the list, the details and evolutions."""

from __future__ import annotations

from .dex import Entry, Pokedex
from .pokemon import type_to_string

__all__ = ["format_list", "format_details", "format_evolutions"]


def _hidden(name: str) -> str:
    return "*" * len(name)


def format_list(pokedex: Pokedex) -> str:
    """Return one line per Pokemon, an arrow marking the current one.

    Names of Pokemon not yet found are replaced by asterisks.
    """
    if not len(pokedex):
        return ""
    current = pokedex.current_entry()
    lines = []
    for entry in pokedex:
        marker = "--> " if entry is current else "    "
        pokemon = entry.pokemon
        name = pokemon.name if entry.found else _hidden(pokemon.name)
        lines.append(f"{marker}#{pokemon.pokemon_id:03d}: {name}\n")
    return "".join(lines)


def format_details(pokedex: Pokedex) -> str:
    """Return the details of the current Pokemon.

    Raises PokedexError when the Pokedex is empty.
    """
    entry = pokedex.current_entry()
    pokemon = entry.pokemon
    header = f"Id: {pokemon.pokemon_id:03d} \n"
    if not entry.found:
        return (
            header
            + f"Name: {_hidden(pokemon.name)}\n"
            + "Height: --\n"
            + "Weight: --\n"
            + "Type: --\n"
        )
    types = " ".join(type_to_string(kind) for kind in pokemon.types)
    return (
        header
        + f"Name: {pokemon.name}\n"
        + f"Height: {pokemon.height:.1f}m\n"
        + f"Weight: {pokemon.weight:.1f}kg\n"
        + f"Type: {types}\n"
    )


def _evolution_step(entry: Entry) -> str:
    pokemon = entry.pokemon
    if not entry.found:
        return f"#{pokemon.pokemon_id:03d} ???? [????]"
    types = ", ".join(type_to_string(kind) for kind in pokemon.types)
    return f"#{pokemon.pokemon_id:03d} {pokemon.name} [{types}]"


def format_evolutions(pokedex: Pokedex) -> str:
    """Return the current Pokemon's evolution chain on one line.

    Raises PokedexError when the Pokedex is empty.
    """
    chain = pokedex.evolution_chain()
    return " --> ".join(_evolution_step(entry) for entry in chain) + "\n"