"""
Read-only lookups over the catalog store.

Every method returns live objects from the store; nothing is copied.
Lookups that match nothing return ``None`` (single record) or an empty
list (filters) and never raise.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pokedex_api.app.core.store import CatalogStore
from pokedex_api.app.schemas.attack import Attack, AttackSet
from pokedex_api.app.schemas.pokemon import Pokemon


class QueryService:
    """Lookups and filters over Pokémon, types and attack buckets."""

    def __init__(self, store: CatalogStore) -> None:
        self.store = store

    def list_pokemon(self) -> List[Pokemon]:
        """Return every Pokémon in insertion order."""
        return self.store.pokemon

    def get_pokemon(self, id: Optional[str] = None, name: Optional[str] = None) -> Optional[Pokemon]:
        """Return the first Pokémon whose ``id`` or ``name`` matches.

        Either criterion alone is enough, so with ``id="1"`` and
        ``name="Charmander"`` the result is whichever of those two
        records comes first.  An omitted argument only matches records
        that lack that field themselves.
        """
        for pokemon in self.store.pokemon:
            if pokemon.id == id or pokemon.name == name:
                return pokemon
        return None

    def list_types(self) -> List[str]:
        return self.store.types

    def list_attacks(self) -> Dict[str, List[Attack]]:
        """Return the raw ``{"fast": [...], "special": [...]}`` mapping."""
        return self.store.attacks

    def get_attacks(self, bucket: Optional[str]) -> Optional[List[Attack]]:
        """Return the bucket named ``bucket``.

        The key space is the bucket names, not attack types: ``"Fire"``
        yields ``None`` just like any other unknown key.
        """
        return self.store.attacks.get(bucket)

    def find_by_type(self, type_name: Optional[str]) -> List[Pokemon]:
        """Return the Pokémon whose ``types`` list includes ``type_name``."""
        return [
            pokemon
            for pokemon in self.store.pokemon
            if isinstance(pokemon.types, list) and type_name in pokemon.types
        ]

    def find_by_attack(self, attack_name: Optional[str]) -> List[Pokemon]:
        """Return the Pokémon knowing an attack called ``attack_name``.

        Fast then special attacks are scanned and the Pokémon is added
        once per matching attack, so a record listing the same attack
        twice appears twice.  Records whose ``attacks`` were overwritten
        with something other than an attack set are skipped.
        """
        results: List[Pokemon] = []
        for pokemon in self.store.pokemon:
            attacks = pokemon.attacks
            if not isinstance(attacks, AttackSet):
                continue
            for attack in list(attacks.fast) + list(attacks.special):
                if attack.name == attack_name:
                    results.append(pokemon)
        return results
