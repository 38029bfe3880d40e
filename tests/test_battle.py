import pytest

from overworld.battle import Pokemon, Trainer


class Loader:
    def __init__(self):
        self.requested = []

    def __call__(self, name):
        self.requested.append(name)
        return ("texture", name)


def test_pokemon_zero_uses_player_texture():
    loader = Loader()
    pokemon = Pokemon(0, loader)
    assert pokemon.texture_name == "Player"
    assert loader.requested == ["Player"]
    assert pokemon.texture == ("texture", "Player")


def test_pokemon_one_uses_tree_texture():
    pokemon = Pokemon(1, Loader())
    assert pokemon.texture_name == "tree1"
    assert pokemon.id == 1


@pytest.mark.parametrize("pokemon_id", [-1, 2, 99])
def test_pokemon_unknown_id_raises(pokemon_id):
    with pytest.raises(ValueError):
        Pokemon(pokemon_id, Loader())


def test_trainer_active_pokemon_follows_id():
    first = Trainer(0, "first", Loader())
    second = Trainer(1, "second", Loader())
    assert first.active_texture_name() == "Player"
    assert second.active_texture_name() == "tree1"
    assert second.active_texture == ("texture", "tree1")
    assert second.name == "second"


def test_trainer_party_starts_empty():
    trainer = Trainer(0, "first", Loader())
    assert trainer.pokemon_count() == 0
    trainer.pokemon.append(Pokemon(1, Loader()))
    assert trainer.pokemon_count() == 1


def test_trainer_with_unknown_id_raises():
    with pytest.raises(ValueError):
        Trainer(5, "nobody", Loader())