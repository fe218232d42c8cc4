import pytest

from pokedex.pokemon import (
    Pokemon,
    PokemonError,
    PokemonType,
    type_from_string,
    type_to_string,
    valid_name,
)


def make_bulbasaur():
    return Pokemon(1, "Bulbasaur", 0.7, 6.9, PokemonType.GRASS, PokemonType.POISON)


def test_attributes_are_kept():
    p = make_bulbasaur()
    assert p.pokemon_id == 1
    assert p.name == "Bulbasaur"
    assert p.height == 0.7
    assert p.weight == 6.9
    assert p.type1 is PokemonType.GRASS
    assert p.type2 is PokemonType.POISON


def test_second_type_defaults_to_none():
    p = Pokemon(25, "Pikachu", 6.0, 6.0, PokemonType.ELECTRIC)
    assert p.type2 is PokemonType.NONE
    assert p.types == (PokemonType.ELECTRIC,)


def test_types_with_two():
    assert make_bulbasaur().types == (PokemonType.GRASS, PokemonType.POISON)


def test_integer_types_are_converted():
    p = Pokemon(2, "Ivysaur", 1.0, 13.0, 6, 7)
    assert p.type1 is PokemonType.GRASS
    assert p.type2 is PokemonType.POISON


def test_clone_is_equal_but_separate():
    original = make_bulbasaur()
    copy = original.clone()
    assert copy == original
    assert copy is not original
    assert (copy.pokemon_id, copy.height, copy.weight) == (1, 0.7, 6.9)


def test_negative_id_rejected():
    with pytest.raises(PokemonError):
        Pokemon(-1, "Missingno", 1.0, 1.0, PokemonType.NORMAL)


def test_type1_none_rejected():
    with pytest.raises(PokemonError):
        Pokemon(3, "Blank", 1.0, 1.0, PokemonType.NONE)


@pytest.mark.parametrize("bad", [PokemonType.INVALID, PokemonType.MAX, 42])
def test_invalid_types_rejected(bad):
    with pytest.raises(PokemonError):
        Pokemon(3, "Odd", 1.0, 1.0, bad)
    with pytest.raises(PokemonError):
        Pokemon(3, "Odd", 1.0, 1.0, PokemonType.FIRE, bad)


def test_same_types_rejected():
    with pytest.raises(PokemonError):
        Pokemon(4, "Charmander", 0.6, 8.5, PokemonType.FIRE, PokemonType.FIRE)


def test_pokemon_is_immutable():
    p = make_bulbasaur()
    with pytest.raises(AttributeError):
        p.name = "Other"
    assert p.name == "Bulbasaur"


@pytest.mark.parametrize("name", ["Pikachu", "Mr Mime", "Ho-Oh", ""])
def test_valid_names(name):
    assert valid_name(name) is True


@pytest.mark.parametrize("name", ["Porygon2", "Farfetch'd", "Flabébé", "a_b"])
def test_invalid_names(name):
    assert valid_name(name) is False


@pytest.mark.parametrize("text", ["Fire", "fire", "FIRE", "fIrE"])
def test_type_from_string_ignores_case(text):
    assert type_from_string(text) is PokemonType.FIRE


def test_type_from_string_none():
    assert type_from_string("None") is PokemonType.NONE


@pytest.mark.parametrize("text", ["", "Firee", "Max", "Invalid"])
def test_type_from_string_unknown(text):
    assert type_from_string(text) is PokemonType.INVALID


def test_type_to_string_values():
    assert type_to_string(PokemonType.FIRE) == "Fire"
    assert type_to_string(PokemonType.NONE) == "None"
    assert type_to_string(PokemonType.FAIRY) == "Fairy"


def test_type_round_trip():
    for kind in PokemonType:
        if kind.is_valid:
            assert type_from_string(type_to_string(kind)) is kind


@pytest.mark.parametrize("bad", [PokemonType.INVALID, PokemonType.MAX, 99])
def test_type_to_string_invalid(bad):
    with pytest.raises(PokemonError):
        type_to_string(bad)