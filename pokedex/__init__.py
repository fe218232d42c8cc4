"""An interactive Pokédex: catalogue, explore, evolve and search Pokémon."""

__version__ = "1.0.0"