"""Trainers and the creatures they send into battle."""

from __future__ import annotations

import logging
from typing import Any, Callable

log = logging.getLogger(__name__)

_TEXTURE_NAMES = ("Player", "tree1")


class Pokemon:
    """A creature whose id selects the texture it is drawn with."""

    def __init__(self, pokemon_id: int, texture_loader: Callable[[str], Any]) -> None:
        if not 0 <= pokemon_id < len(_TEXTURE_NAMES):
            raise ValueError(f"no texture for pokemon id {pokemon_id}")
        self.id = pokemon_id
        self.texture_name = _TEXTURE_NAMES[pokemon_id]
        self.texture = texture_loader(self.texture_name)
        log.debug("pokemon texture %s", self.texture_name)


class Trainer:
    """A named trainer with an active creature and a party."""

    def __init__(
        self, trainer_id: int, name: str, texture_loader: Callable[[str], Any]
    ) -> None:
        self.id = trainer_id
        self.name = name
        self.active = Pokemon(trainer_id, texture_loader)
        self.pokemon: list[Pokemon] = []

    def pokemon_count(self) -> int:
        return len(self.pokemon)

    def active_texture_name(self) -> str:
        return self.active.texture_name

    @property
    def active_texture(self) -> Any:
        return self.active.texture