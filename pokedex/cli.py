"""Interactive command loop for exploring a Pokedex."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, TextIO

from .dex import Pokedex, PokedexError
from .filters import found_pokemon, pokemon_of_type, search_pokemon
from .pokemon import Pokemon, PokemonError, PokemonType, type_from_string, valid_name
from .views import format_details, format_evolutions, format_list

__all__ = ["run_command", "explore_pokedex", "main"]

QUIT_COMMAND = "q"
HELP_COMMAND = "?"

_C_SPACE = " \t\n\v\f\r"

_INT = (re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)"), int)
_FLOAT = (
    re.compile(
        r"[ \t\n\v\f\r]*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
    ),
    float,
)
_WORD = (re.compile(r"[ \t\n\v\f\r]*([^ \t\n\v\f\r]+)"), str)

_WELCOME = (
    "===========================[ Pokédex ]==========================\n"
    "            Welcome to the Pokédex!  How can I help?\n"
    "================================================================\n"
)

_HELP_ENTRIES = [
    ("a [pokemon_id] [name] [height] [weight] [type1] [type2]",
     "    Add a Pokemon to the Pokedex"),
    ("p", "    Print all of the Pokemon in the Pokedex "
          "(in the order they were added)"),
    ("g", "    Print currently selected Pokemon"),
    ("d", "    Display details of the currently selected Pokemon"),
    (">", "    Move the cursor to the next Pokemon in the Pokedex"),
    ("<", "    Move the cursor to the previous Pokemon in the Pokedex"),
    ("m [pokemon_id]",
     "    Move the cursor to the Pokemon with the specified pokemon_id"),
    ("r", "    Remove the current Pokemon from the Pokedex"),
    ("x [seed] [factor] [how_many]", "    Go exploring for Pokemon"),
    ("f", "    Set the current Pokemon to be found"),
    ("c", "    Print out the count of Pokemon who have been found"),
    ("t", "    Print out the total count of Pokemon in the Pokedex"),
    ("e [pokemon_A] [pokemon_B]",
     "    Add an evolution from Pokemon A to Pokemon B"),
    ("s", "    Show evolutions of the currently selected Pokemon"),
    ("n", "    Show next evolution of current selected Pokemon"),
    ("F", "     Create a new Pokedex containing Pokemon that have "
          "previously been found"),
    ("S [string]", "     Create a new Pokedex containing Pokemon that have "
                   "the specified string in their name"),
    ("T [type]", "     Create a new Pokedex containing Pokemon that have "
                 "the specified type"),
    ("q", "    Quit"),
    ("?", "    Show help"),
]


def _scan(text: str, *fields: tuple[re.Pattern[str], Callable[[str], object]]) -> list:
    """Read fields from the text in order, stopping at the first that fails."""
    values: list = []
    position = 0
    for pattern, convert in fields:
        match = pattern.match(text, position)
        if match is None:
            break
        values.append(convert(match.group(1)))
        position = match.end()
    return values


def _show_help(out: TextIO) -> None:
    out.write("============================[ Help ]============================\n")
    for usage, description in _HELP_ENTRIES:
        out.write(f"  {usage}\n{description}\n")
    out.write("================================================================\n")


def _do_add(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    values = _scan(args, _INT, _WORD, _FLOAT, _FLOAT, _WORD, _WORD)
    if len(values) < 5:
        print("Invalid Add Command", file=out)
        return
    if len(values) == 5:
        values.append("None")
    pokemon_id, name, height, weight, type_name1, type_name2 = values
    if pokemon_id < 0:
        print("Invalid pokemon_id", file=out)
    if not valid_name(name):
        print("Invalid name", file=out)
        return
    type1 = type_from_string(type_name1)
    type2 = type_from_string(type_name2)
    if type1 in (PokemonType.INVALID, PokemonType.NONE):
        print("Invalid type1", file=out)
        return
    if type2 is PokemonType.INVALID:
        print("Invalid type2", file=out)
        return
    pokedex.add(Pokemon(pokemon_id, name, height, weight, type1, type2))
    print(f"Added {name} to the Pokedex!", file=out)


def _do_print(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    out.write(format_list(pokedex))


def _do_details(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    out.write(format_details(pokedex))


def _do_get(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    current = pokedex.current()
    print(
        f"Currently selected Pokemon: #{current.pokemon_id} ({current.name})",
        file=out,
    )


def _do_next(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    pokedex.select_next()


def _do_prev(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    pokedex.select_prev()


def _do_change_current(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    values = _scan(args, _INT)
    if len(values) != 1:
        print("Invalid Change Current Command", file=out)
        return
    pokedex.select(values[0])


def _do_remove(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    pokedex.remove_current()


def _do_explore(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    values = _scan(args, _INT, _INT, _INT)
    if len(values) != 3:
        print("Invalid Explore Command", file=out)
        return
    seed, factor, how_many = values
    pokedex.explore(seed, factor, how_many)


def _do_set_found(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    pokedex.find_current()


def _do_count_found(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    print(f"Total Found Pokemon: {pokedex.count_found()}", file=out)


def _do_count_total(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    print(f"Total Pokemon: {pokedex.count_total()}", file=out)


def _do_evolution(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    values = _scan(args, _INT, _INT)
    if len(values) != 2:
        print("Invalid Evolution Command", file=out)
        return
    pokedex.add_evolution(*values)


def _do_show_evolutions(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    out.write(format_evolutions(pokedex))


def _do_next_evolution(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    evolution = pokedex.next_evolution()
    if evolution is None:
        print("DOES_NOT_EVOLVE", file=out)
    else:
        print(f"Id: {evolution:03d}", file=out)


def _do_get_found(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    result = found_pokemon(pokedex)
    print("Switching to explore the Pokedex get_found_pokemon returned", file=out)
    explore_pokedex(result, stream, out)


def _do_get_type(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    kind = type_from_string(args)
    if kind in (PokemonType.INVALID, PokemonType.NONE, PokemonType.MAX):
        print("Invalid type", file=out)
        return
    result = pokemon_of_type(pokedex, kind)
    print(
        f"Switching to explore the Pokedex get_pokemon_of_type {args} returned",
        file=out,
    )
    explore_pokedex(result, stream, out)


def _do_search(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    if not args:
        print("Invalid Search Command", file=out)
        return
    result = search_pokemon(pokedex, args)
    print(
        f'Switching to explore the Pokedex search_pokemon "{args}" returned',
        file=out,
    )
    explore_pokedex(result, stream, out)


def _do_quit(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    print("Goodbye.", file=out)


def _do_help(pokedex: Pokedex, args: str, stream: TextIO, out: TextIO) -> None:
    _show_help(out)


_COMMANDS: dict[str, Callable[[Pokedex, str, TextIO, TextIO], None]] = {
    "a": _do_add,
    "p": _do_print,
    "d": _do_details,
    "g": _do_get,
    ">": _do_next,
    "<": _do_prev,
    "m": _do_change_current,
    "r": _do_remove,
    "x": _do_explore,
    "f": _do_set_found,
    "c": _do_count_found,
    "t": _do_count_total,
    "e": _do_evolution,
    "s": _do_show_evolutions,
    "n": _do_next_evolution,
    "F": _do_get_found,
    "S": _do_search,
    "T": _do_get_type,
    QUIT_COMMAND: _do_quit,
    HELP_COMMAND: _do_help,
}


def run_command(
    pokedex: Pokedex,
    line: str,
    stream: TextIO | None = None,
    out: TextIO | None = None,
) -> bool:
    """Carry out one command line; return False once the user quits.

    Errors from the Pokedex propagate as PokedexError or PokemonError.
    """
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    text = line.lstrip(_C_SPACE)
    if not text:
        return True
    command, args = text[0], text[1:].lstrip(_C_SPACE)
    handler = _COMMANDS.get(command)
    if handler is None:
        print(f"Unknown Command '{command}'", file=out)
        print(f"Type '{HELP_COMMAND}' for a list of commands", file=out)
        return True
    handler(pokedex, args, stream, out)
    return command != QUIT_COMMAND


def _read_command(stream: TextIO, out: TextIO) -> str | None:
    out.write("Enter command: ")
    line = stream.readline()
    if not line:
        return None
    return line.split("\n", 1)[0]


def explore_pokedex(
    pokedex: Pokedex | None = None,
    stream: TextIO | None = None,
    out: TextIO | None = None,
) -> None:
    """Read and run commands until quit or end of input.

    Without a Pokedex a fresh one is made and a welcome is shown; with one,
    it is explored as a nested session.
    """
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    nested = pokedex is not None
    if pokedex is None:
        out.write(_WELCOME)
        pokedex = Pokedex()
    else:
        print(f"Enter '{QUIT_COMMAND}' to return to previous pokedex", file=out)

    while True:
        line = _read_command(stream, out)
        if line is None or not run_command(pokedex, line, stream, out):
            break

    if nested:
        print("Returning to previous pokedex.", file=out)


def main(argv: list[str] | None = None) -> int:
    """Run an interactive Pokedex session on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="pokedex", description="Interactively explore a Pokedex."
    )
    parser.parse_args(argv)
    try:
        explore_pokedex(None, sys.stdin, sys.stdout)
    except PokedexError as error:
        print(error, file=sys.stdout)
        return 1
    except PokemonError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())