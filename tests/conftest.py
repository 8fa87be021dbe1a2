"""Shared pytest fixtures for the catalog tests."""

from __future__ import annotations

import copy
from typing import Any, Dict, Iterator

import pytest
from fastapi.testclient import TestClient

from pokedex_api.app.core.store import CatalogStore
from pokedex_api.app.main import create_app
from pokedex_api.app.services import MutationService, QueryService


def _attack(name: str, type_: str, damage: int) -> Dict[str, Any]:
    return {"name": name, "type": type_, "damage": damage}


SAMPLE_SEED: Dict[str, Any] = {
    "pokemon": [
        {
            "id": "1",
            "name": "Bulbasaur",
            "classification": "Seed Pokémon",
            "types": ["Grass", "Poison"],
            "resistant": ["Water", "Electric"],
            "weaknesses": ["Fire", "Ice"],
            "weight": {"minimum": "6.04kg", "maximum": "7.76kg"},
            "height": {"minimum": "0.61m", "maximum": "0.79m"},
            "fleeRate": 0.1,
            "evolutionRequirements": {"amount": 25, "name": "Bulbasaur candies"},
            "evolutions": [{"id": "2", "name": "Ivysaur"}],
            "maxCP": 951,
            "maxHP": 1071,
            "attacks": {
                "fast": [_attack("Tackle", "Normal", 12), _attack("Vine Whip", "Grass", 7)],
                "special": [_attack("Power Whip", "Grass", 70)],
            },
        },
        {
            "id": "4",
            "name": "Charmander",
            "classification": "Lizard Pokémon",
            "types": ["Fire"],
            "weaknesses": ["Water", "Ground", "Rock"],
            "maxCP": 841,
            "maxHP": 955,
            "attacks": {
                "fast": [_attack("Ember", "Fire", 10), _attack("Scratch", "Normal", 6)],
                "special": [_attack("Flamethrower", "Fire", 55)],
            },
        },
        {
            "id": "7",
            "name": "Squirtle",
            "classification": "Tiny Turtle Pokémon",
            "types": ["Water"],
            "attacks": {
                "fast": [_attack("Tackle", "Normal", 12), _attack("Bubble", "Water", 25)],
                "special": [_attack("Aqua Tail", "Water", 45)],
            },
        },
        {
            "id": "25",
            "name": "Pikachu",
            "classification": "Mouse Pokémon",
            "types": ["Electric"],
            "Previous evolution(s)": [{"id": "172", "name": "Pichu"}],
            "maxCP": 787,
            "maxHP": 887,
            "attacks": {
                "fast": [_attack("Thunder Shock", "Electric", 5), _attack("Quick Attack", "Normal", 10)],
                "special": [_attack("Thunder", "Electric", 100), _attack("Thunder Wave", "Electric", 0)],
            },
        },
    ],
    "types": ["Grass", "Poison", "Fire", "Water", "Electric"],
    "attacks": {
        "fast": [_attack("Tackle", "Normal", 12), _attack("Ember", "Fire", 10)],
        "special": [_attack("Thunder Wave", "Electric", 0), _attack("Flamethrower", "Fire", 55)],
    },
}


@pytest.fixture
def seed() -> Dict[str, Any]:
    """A fresh copy of the sample seed, safe to modify."""
    return copy.deepcopy(SAMPLE_SEED)


@pytest.fixture
def store(seed: Dict[str, Any]) -> CatalogStore:
    """Catalog store built from the sample seed."""
    return CatalogStore.from_seed(seed)


@pytest.fixture
def queries(store: CatalogStore) -> QueryService:
    return QueryService(store)


@pytest.fixture
def mutations(store: CatalogStore) -> MutationService:
    return MutationService(store)


@pytest.fixture
def client(store: CatalogStore) -> Iterator[TestClient]:
    """HTTP client for an app serving the sample store."""
    with TestClient(create_app(store)) as test_client:
        yield test_client
