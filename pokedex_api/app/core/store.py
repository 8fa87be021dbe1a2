"""
In-memory catalog store and seed loading.

This module provides the ``CatalogStore`` that owns the three
collections the service works on (Pokémon records, type names and the
two attack buckets), a loader for the JSON seed they start from
(``load_seed``), the startup hook that builds the store
(``init_store``) and a helper dependency for FastAPI routes
(``get_store``).

Nothing is persisted: the store is built once when the application
starts and lives until it shuts down.  Services receive the store
explicitly and operate on its lists in place, so callers always see
live records rather than copies.

The attack buckets are independent of the ``attacks`` embedded in each
Pokémon record.  Adding or removing a bucket attack never touches a
Pokémon, and editing a Pokémon never touches the buckets.
"""

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from fastapi import Request

from pokedex_api.app.core.config import settings
from pokedex_api.app.core.errors import InvalidKeyError
from pokedex_api.app.schemas.attack import Attack
from pokedex_api.app.schemas.pokemon import Pokemon

logger = logging.getLogger(__name__)

BUCKETS = ("fast", "special")

DEFAULT_SEED_PATH = Path(__file__).resolve().parent.parent / "data" / "pokemon.json"


class CatalogStore:
    """Owner of the Pokémon, type and attack-bucket collections.

    The collections are plain lists exposed as attributes; services
    read and mutate them directly.  ``lock`` is held by the gateway for
    the duration of each operation so a lookup and the mutation that
    follows it are never interleaved with another request.
    """

    def __init__(
        self,
        pokemon: Optional[Iterable[Pokemon]] = None,
        types: Optional[Iterable[str]] = None,
        attacks: Optional[Mapping[str, Iterable[Attack]]] = None,
    ) -> None:
        attacks = attacks or {}
        self.pokemon: List[Pokemon] = list(pokemon or [])
        self.types: List[str] = list(types or [])
        self.attacks: Dict[str, List[Attack]] = {key: list(attacks.get(key, [])) for key in BUCKETS}
        self.lock = threading.RLock()

    @classmethod
    def from_seed(cls, data: Mapping[str, Any]) -> "CatalogStore":
        """Build a store from a parsed seed mapping.

        The mapping has the keys ``pokemon`` (list of records),
        ``types`` (list of strings) and ``attacks`` (``fast`` and
        ``special`` lists).  Missing keys yield empty collections.
        """
        raw_attacks = data.get("attacks") or {}
        return cls(
            pokemon=[Pokemon.model_validate(item) for item in data.get("pokemon") or []],
            types=[str(name) for name in data.get("types") or []],
            attacks={
                key: [Attack.model_validate(item) for item in raw_attacks.get(key) or []]
                for key in BUCKETS
            },
        )

    def bucket(self, key: Optional[str]) -> List[Attack]:
        """Return the live attack list for ``key``.

        Raises ``InvalidKeyError`` if ``key`` is not ``fast`` or
        ``special``.
        """
        if key not in self.attacks:
            raise InvalidKeyError("attack bucket", key, BUCKETS)
        return self.attacks[key]

    def __repr__(self) -> str:
        return (
            f"CatalogStore(pokemon={len(self.pokemon)}, types={len(self.types)}, "
            f"fast={len(self.attacks['fast'])}, special={len(self.attacks['special'])})"
        )


def get_seed_path() -> Path:
    """Compute the path to the JSON seed file.

    If ``settings.seed_path`` is empty the seed bundled with the
    package is used.  Absolute paths are used as given; relative paths
    are resolved against the current working directory.
    """
    if not settings.seed_path:
        return DEFAULT_SEED_PATH
    if os.path.isabs(settings.seed_path):
        return Path(settings.seed_path)
    return Path(settings.seed_path).resolve()


def load_seed(path: Optional[Path] = None) -> Dict[str, Any]:
    """Read and parse a seed file (the configured one by default)."""
    seed_path = Path(path) if path is not None else get_seed_path()
    with seed_path.open(encoding="utf-8") as fh:
        return json.load(fh)


def init_store(path: Optional[Path] = None) -> CatalogStore:
    """Create the catalog store from seed data.

    Called once at application startup.  A missing or malformed seed
    file is fatal: the exception propagates and the application does
    not start.
    """
    seed_path = Path(path) if path is not None else get_seed_path()
    store = CatalogStore.from_seed(load_seed(seed_path))
    logger.info("Loaded catalog from %s: %r", seed_path, store)
    return store


def get_store(request: Request) -> CatalogStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.store
