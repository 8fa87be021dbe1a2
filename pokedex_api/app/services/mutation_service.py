"""
Insert, edit and remove operations over the catalog store.

Mutations work on the live collections.  Apart from bucket and field
names, which must come from a fixed set, inputs are not validated:
Pokémon and types may be duplicated, and an edited field takes the
given value verbatim (``maxCP`` set to ``"600"`` stays the string
``"600"``; a nested object can be replaced by a scalar).

A lookup that matches nothing returns ``None`` and leaves the store
untouched.  Every mutation is a single step, so there is no partial
state to roll back.

Field edits go through closed setter tables keyed by the external
(camelCase) field names.  Unknown names raise ``InvalidKeyError``
instead of creating new attributes.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from pokedex_api.app.core.errors import InvalidKeyError
from pokedex_api.app.core.store import CatalogStore
from pokedex_api.app.schemas.attack import Attack
from pokedex_api.app.schemas.pokemon import Pokemon, wire_names

logger = logging.getLogger(__name__)

FieldSetter = Callable[[Any, Any], None]


def _assign(attribute: str) -> FieldSetter:
    def setter(record: Any, value: Any) -> None:
        setattr(record, attribute, value)

    return setter


POKEMON_FIELD_SETTERS: Dict[str, FieldSetter] = {
    wire: _assign(attribute) for wire, attribute in wire_names(Pokemon).items()
}
ATTACK_FIELD_SETTERS: Dict[str, FieldSetter] = {
    wire: _assign(attribute) for wire, attribute in wire_names(Attack).items()
}


def _setter_for(table: Dict[str, FieldSetter], kind: str, field: Optional[str]) -> FieldSetter:
    try:
        return table[field]
    except KeyError:
        raise InvalidKeyError(kind, field, table) from None


class MutationService:
    """Add, edit and remove Pokémon, types and bucket attacks."""

    def __init__(self, store: CatalogStore) -> None:
        self.store = store

    # Pokémon ---------------------------------------------------------------

    def add_pokemon(
        self,
        id: Optional[str] = None,
        name: Optional[str] = None,
        classification: Optional[str] = None,
    ) -> Pokemon:
        """Append a Pokémon with only ``id``, ``name`` and ``classification`` set."""
        pokemon = Pokemon(id=id, name=name, classification=classification)
        self.store.pokemon.append(pokemon)
        logger.info("Added Pokémon %s (id=%s)", name, id)
        return pokemon

    def edit_pokemon(self, name: Optional[str], field: Optional[str], value: Any) -> Optional[Pokemon]:
        """Overwrite ``field`` on the first Pokémon named ``name``.

        Matching is by exact name only; ``id`` is not consulted.
        """
        setter = _setter_for(POKEMON_FIELD_SETTERS, "Pokémon field", field)
        for pokemon in self.store.pokemon:
            if pokemon.name == name:
                setter(pokemon, value)
                logger.info("Edited Pokémon %s: %s=%r", name, field, value)
                return pokemon
        logger.debug("Edit skipped, no Pokémon named %r", name)
        return None

    def remove_pokemon(self, name: Optional[str]) -> Optional[List[Pokemon]]:
        """Remove the first Pokémon named ``name`` and return the remaining list."""
        for index, pokemon in enumerate(self.store.pokemon):
            if pokemon.name == name:
                del self.store.pokemon[index]
                logger.info("Removed Pokémon %s", name)
                return self.store.pokemon
        logger.debug("Remove skipped, no Pokémon named %r", name)
        return None

    # Types -----------------------------------------------------------------

    def add_type(self, name: Optional[str]) -> List[str]:
        """Append ``name`` to the type list and return the whole list."""
        self.store.types.append(name)
        logger.info("Added type %s", name)
        return self.store.types

    def edit_type(self, old_name: Optional[str], new_name: Optional[str]) -> Optional[List[str]]:
        """Rename the first type equal to ``old_name``, keeping its position."""
        try:
            index = self.store.types.index(old_name)
        except ValueError:
            logger.debug("Edit skipped, no type %r", old_name)
            return None
        self.store.types[index] = new_name
        logger.info("Renamed type %s to %s", old_name, new_name)
        return self.store.types

    def remove_type(self, name: Optional[str]) -> Optional[List[str]]:
        try:
            self.store.types.remove(name)
        except ValueError:
            logger.debug("Remove skipped, no type %r", name)
            return None
        logger.info("Removed type %s", name)
        return self.store.types

    # Attack buckets --------------------------------------------------------

    def add_attack(
        self,
        bucket: Optional[str],
        name: Optional[str] = None,
        type: Optional[str] = None,
        damage: Optional[int] = None,
    ) -> Attack:
        """Append an attack to the ``fast`` or ``special`` bucket.

        Pokémon records are not touched; their embedded attack sets are
        separate from the buckets.
        """
        attacks = self.store.bucket(bucket)
        attack = Attack(name=name, type=type, damage=damage)
        attacks.append(attack)
        logger.info("Added %s attack %s", bucket, name)
        return attack

    def edit_attack(
        self,
        bucket: Optional[str],
        name: Optional[str],
        field: Optional[str],
        value: Any,
    ) -> Optional[Attack]:
        """Overwrite ``field`` on the first attack named ``name`` in ``bucket``."""
        attacks = self.store.bucket(bucket)
        setter = _setter_for(ATTACK_FIELD_SETTERS, "attack field", field)
        for attack in attacks:
            if attack.name == name:
                setter(attack, value)
                logger.info("Edited %s attack %s: %s=%r", bucket, name, field, value)
                return attack
        logger.debug("Edit skipped, no %s attack named %r", bucket, name)
        return None

    def remove_attack(self, bucket: Optional[str], name: Optional[str]) -> Optional[Dict[str, List[Attack]]]:
        """Remove the first attack named ``name`` from ``bucket``.

        Returns the full bucket mapping, not just the modified bucket.
        """
        attacks = self.store.bucket(bucket)
        for index, attack in enumerate(attacks):
            if attack.name == name:
                del attacks[index]
                logger.info("Removed %s attack %s", bucket, name)
                return self.store.attacks
        logger.debug("Remove skipped, no %s attack named %r", bucket, name)
        return None
