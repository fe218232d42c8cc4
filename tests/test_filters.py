import pytest

from pokedex.dex import Pokedex, PokedexError
from pokedex.filters import found_pokemon, matches, pokemon_of_type, search_pokemon
from pokedex.pokemon import Pokemon, PokemonType


def _bulbasaur():
    return Pokemon(1, "Bulbasaur", 0.7, 6.9, PokemonType.GRASS, PokemonType.POISON)


def _ivysaur():
    return Pokemon(2, "Ivysaur", 1.0, 13.0, PokemonType.GRASS, PokemonType.POISON)


def _pikachu():
    return Pokemon(25, "Pikachu", 6.0, 6.0, PokemonType.ELECTRIC, PokemonType.NONE)


def _is_copy(first, second):
    return first == second and first is not second


def _ids(dex):
    return [entry.pokemon_id for entry in dex]


def test_found_pokemon_of_empty_pokedex():
    found = found_pokemon(Pokedex())
    assert found.count_total() == 0
    assert found.count_found() == 0


def test_found_pokemon_progression():
    dex = Pokedex()
    bulbasaur = _bulbasaur()
    dex.add(bulbasaur)
    dex.add(_pikachu())
    dex.add(_ivysaur())
    assert dex.current() is bulbasaur

    found = found_pokemon(dex)
    assert found.count_total() == 0
    assert found.count_found() == 0

    dex.find_current()
    found = found_pokemon(dex)
    assert found.count_total() == 1
    assert found.count_found() == 1
    assert _is_copy(found.current(), bulbasaur)

    dex.select_next()
    dex.find_current()
    found = found_pokemon(dex)
    assert found.count_total() == 2
    assert found.count_found() == 2
    assert _is_copy(found.current(), bulbasaur)


def test_find_current_counts_in_found_pokedex():
    dex = Pokedex()
    dex.add(_bulbasaur())
    dex.add(_ivysaur())
    dex.add(_pikachu())
    dex.find_current()
    assert found_pokemon(dex).count_found() == 1
    dex.select_next()
    dex.find_current()
    assert found_pokemon(dex).count_found() == 2


def test_found_pokemon_sorted_by_id():
    dex = Pokedex()
    dex.add(Pokemon(129, "Staryu", 0.8, 34.5, PokemonType.WATER))
    dex.add(Pokemon(25, "Pikachu", 0.4, 6.0, PokemonType.ELECTRIC), found=True)
    dex.add(
        Pokemon(72, "Slowpoke", 1.2, 36.0, PokemonType.WATER, PokemonType.PSYCHIC),
        found=True,
    )
    dex.add(Pokemon(3, "Squirtle", 0.5, 9.0, PokemonType.WATER), found=True)
    dex.add(Pokemon(50, "Diglett", 0.2, 0.8, PokemonType.GROUND))
    found = found_pokemon(dex)
    assert _ids(found) == [3, 25, 72]
    assert found.current().pokemon_id == 3
    assert dex.count_total() == 5


def test_copies_have_no_evolutions():
    dex = Pokedex()
    dex.add(_bulbasaur(), found=True)
    dex.add(_ivysaur(), found=True)
    dex.add_evolution(1, 2)
    found = found_pokemon(dex)
    assert found.next_evolution() is None
    assert dex.next_evolution() == 2


def test_pokemon_of_type_keeps_order_and_found_only():
    dex = Pokedex()
    dex.add(Pokemon(129, "Staryu", 0.8, 34.5, PokemonType.WATER), found=True)
    dex.add(Pokemon(25, "Pikachu", 0.4, 6.0, PokemonType.ELECTRIC), found=True)
    dex.add(
        Pokemon(72, "Slowpoke", 1.2, 36.0, PokemonType.PSYCHIC, PokemonType.WATER),
        found=True,
    )
    dex.add(Pokemon(3, "Squirtle", 0.5, 9.0, PokemonType.WATER), found=True)
    dex.add(Pokemon(50, "Diglett", 0.2, 0.8, PokemonType.GROUND), found=True)
    dex.add(Pokemon(7, "Wartortle", 1.0, 22.5, PokemonType.WATER))
    water = pokemon_of_type(dex, PokemonType.WATER)
    assert _ids(water) == [129, 72, 3]
    assert water.current().pokemon_id == 129
    assert water.count_found() == 3


@pytest.mark.parametrize(
    "kind", [PokemonType.NONE, PokemonType.INVALID, PokemonType.MAX, 99]
)
def test_pokemon_of_type_rejects_bad_types(kind):
    dex = Pokedex()
    dex.add(_pikachu(), found=True)
    with pytest.raises(PokedexError):
        pokemon_of_type(dex, kind)


def test_pokemon_of_type_without_match_is_empty():
    dex = Pokedex()
    dex.add(_pikachu(), found=True)
    assert pokemon_of_type(dex, PokemonType.FIRE).count_total() == 0


def test_search_documented_example():
    dex = Pokedex()
    for pid, name in [
        (129, "Staryu"),
        (60, "Polywag"),
        (25, "Pikachu"),
        (72, "Slowpoke"),
        (3, "Squirtle"),
        (11, "Metapod"),
        (50, "Diglett"),
        (124, "Vaporeon"),
    ]:
        dex.add(Pokemon(pid, name, 1.0, 1.0, PokemonType.NORMAL), found=True)
    dex.select(72)
    result = search_pokemon(dex, "po")
    assert _ids(result) == [60, 72, 11, 124]
    assert result.current().pokemon_id == 60


def test_search_skips_unfound_pokemon():
    dex = Pokedex()
    dex.add(_bulbasaur())
    dex.add(_ivysaur(), found=True)
    assert _ids(search_pokemon(dex, "saur")) == [2]


@pytest.mark.parametrize(
    "name, text, expected",
    [
        ("Bulbasaur", "basau", True),
        ("Bulbasaur", "bulb", True),
        ("Bulbasaur", "BULB", True),
        ("Pikachu", "", True),
        ("Pikachu", "chux", False),
        ("Pikachu", "zap", False),
        ("aab", "ab", True),
        ("aaab", "aab", False),
    ],
)
def test_matches(name, text, expected):
    assert matches(name, text) is expected