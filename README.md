# pokedex

A small, interactive Pokédex. Add Pokémon, move a cursor through them, go
exploring to "find" them, link evolutions, and build new Pokédexes of found
Pokémon by type, by name fragment, or in id order.

## Installation

```
pip install .
```

## Interactive use

```
pokedex
```

`python -m pokedex.cli` starts the same session. Commands are read one per
line from standard input, after an `Enter command: ` prompt:

| Command | Meaning |
|---|---|
| `a id name height weight type1 [type2]` | Add a Pokémon (type2 defaults to `None`) |
| `p` | Print every Pokémon in the order added, an arrow marking the current one |
| `g` | Show the currently selected Pokémon |
| `d` | Details of the current Pokémon |
| `>` / `<` | Move the cursor forward / back |
| `m id` | Select the Pokémon with that id |
| `r` | Remove the current Pokémon |
| `x seed factor how_many` | Go exploring |
| `f` | Mark the current Pokémon as found |
| `c` / `t` | Count found / total Pokémon |
| `e from_id to_id` | Record that one Pokémon evolves into another |
| `s` | Show the evolution chain of the current Pokémon |
| `n` | Id of the next evolution of the current Pokémon, or `DOES_NOT_EVOLVE` |
| `F` | Explore a Pokédex of the found Pokémon, sorted by id |
| `S text` | Explore a Pokédex of found Pokémon whose name matches `text` |
| `T type` | Explore a Pokédex of found Pokémon of that type |
| `?` | Help |
| `q` | Quit (or return to the previous Pokédex) |

Type names are matched without regard to case (`fire`, `Fire`). Names may
contain only letters, spaces and dashes. Pokémon not yet found are shown with
their names replaced by asterisks, and their details and types hidden.

`F`, `S` and `T` open a nested session on the new Pokédex; `q` there returns
to the previous one. The copies in a new Pokédex are all marked found and
carry no evolution links.

Exploring draws `how_many` ids from a deterministic generator seeded with
`seed`, each taken modulo `factor`; every Pokémon with a drawn id becomes
found. The same seed always gives the same result.

An operation that cannot be carried out — a duplicate id, an impossible
evolution, a factor too small to reach any Pokémon, asking for the current
Pokémon of an empty Pokédex, invalid Pokémon data — ends the session with
exit status 1 after printing the error.

## Library use

```python
from pokedex.pokemon import Pokemon, PokemonType
from pokedex.dex import Pokedex
from pokedex.filters import found_pokemon, search_pokemon
from pokedex.views import format_list, format_details

dex = Pokedex()
dex.add(Pokemon(1, "Bulbasaur", 0.7, 6.9, PokemonType.GRASS, PokemonType.POISON))
dex.add(Pokemon(25, "Pikachu", 0.4, 6.0, PokemonType.ELECTRIC))
dex.find_current()

print(format_list(dex), end="")
print(format_details(dex), end="")
print(format_list(search_pokemon(dex, "saur")), end="")
print(dex.count_found(), dex.count_total())
```

The modules:

- `pokedex.pokemon` — `Pokemon` (a frozen dataclass with `clone()` and
  `types`), the `PokemonType` enum, `valid_name`, `type_from_string`,
  `type_to_string`, and `PokemonError`.
- `pokedex.dex` — `Pokedex`, holding `Entry` objects in insertion order with
  a cursor: `add`, `current`, `current_entry`, `find_current`,
  `select_next`, `select_prev`, `select`, `remove_current`, `explore`,
  `count_found`, `count_total`, `add_evolution`, `next_evolution`
  (returns `None` when there is none), `evolution_chain`; errors raise
  `PokedexError`.
- `pokedex.filters` — `pokemon_of_type`, `found_pokemon`, `search_pokemon`,
  each returning a new `Pokedex`, and `matches`, the name matcher.
- `pokedex.views` — `format_list`, `format_details`, `format_evolutions`.
- `pokedex.crandom` — `CRandom`, the seeded generator used by `explore`.
- `pokedex.cli` — `run_command`, `explore_pokedex`, `main`.

Name matching ignores ASCII case and an empty text matches every name. It is
a simple forward scan: after a partial match fails it does not step back in
the name, so some fragments that do occur in a name (for example `aab` in
`aaab`) are not matched.

## What it does not do

A Pokédex lives in memory only: there is no saving or loading, and every
session starts empty.

## Running the tests

```
pip install .[test]
pytest
```