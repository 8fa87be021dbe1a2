"""
Root resolvers and field resolution for the GraphQL schema.

``build_root`` returns the root value for one request: a mapping from
each Query and Mutation field to a resolver that unpacks the declared
arguments and calls the matching service method.  Mutation inputs are
validated into the pydantic input models first, so services receive
plain keyword arguments.

``catalog_field_resolver`` replaces graphql-core's default resolver.
It maps camelCase schema fields onto the snake_case attributes of the
pydantic records and resolves anything a value does not carry (for
example ``Weight.minimum`` on a weight overwritten with a string) to
``null``.
"""

from functools import lru_cache
from typing import Any, Callable, Dict, Mapping, Optional, Type

from graphql import GraphQLResolveInfo
from pydantic import BaseModel

from pokedex_api.app.core.store import CatalogStore
from pokedex_api.app.schemas.attack import AttackCreate, AttackEdit, AttackRemove
from pokedex_api.app.schemas.pokemon import PokemonCreate, PokemonEdit, PokemonRemove, wire_names
from pokedex_api.app.schemas.type import TypeEdit, TypeInput
from pokedex_api.app.services import MutationService, QueryService

Resolver = Callable[..., Any]


@lru_cache(maxsize=None)
def _attribute_names(model: Type[BaseModel]) -> Dict[str, str]:
    return wire_names(model)


def catalog_field_resolver(source: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
    """Resolve ``info.field_name`` on ``source``.

    Mappings (the root value and the attack-bucket dict) are read by
    key, pydantic records through their alias table and anything else
    by attribute.  Callables found on the root are invoked with the
    field arguments.
    """
    field_name = info.field_name
    if isinstance(source, Mapping):
        value = source.get(field_name)
    elif isinstance(source, BaseModel):
        attribute = _attribute_names(type(source)).get(field_name)
        value = getattr(source, attribute) if attribute else None
    else:
        value = getattr(source, field_name, None)
    if callable(value):
        return value(info, **args)
    return value


def build_root(store: CatalogStore) -> Dict[str, Resolver]:
    """Return the root value wiring every operation to ``store``."""
    queries = QueryService(store)
    mutations = MutationService(store)

    def pokemon(info: GraphQLResolveInfo, id: Optional[str] = None, name: Optional[str] = None):
        return queries.get_pokemon(id=id, name=name)

    def attack(info: GraphQLResolveInfo, type: Optional[str] = None):
        return queries.get_attacks(type)

    def pokemon_by_type(info: GraphQLResolveInfo, name: Optional[str] = None):
        return queries.find_by_type(name)

    def pokemon_by_attack(info: GraphQLResolveInfo, name: Optional[str] = None):
        return queries.find_by_attack(name)

    def add_pokemon(info: GraphQLResolveInfo, input: Optional[dict] = None):
        data = PokemonCreate.model_validate(input or {})
        return mutations.add_pokemon(id=data.id, name=data.name, classification=data.classification)

    def edit_pokemon(info: GraphQLResolveInfo, input: Optional[dict] = None):
        data = PokemonEdit.model_validate(input or {})
        return mutations.edit_pokemon(data.name, data.edit_field, data.edit_value)

    def remove_pokemon(info: GraphQLResolveInfo, input: Optional[dict] = None):
        return mutations.remove_pokemon(PokemonRemove.model_validate(input or {}).name)

    def add_attack(info: GraphQLResolveInfo, input: Optional[dict] = None):
        data = AttackCreate.model_validate(input or {})
        return mutations.add_attack(data.fast_or_special, name=data.name, type=data.type, damage=data.damage)

    def edit_attack(info: GraphQLResolveInfo, input: Optional[dict] = None):
        data = AttackEdit.model_validate(input or {})
        return mutations.edit_attack(data.fast_or_special, data.name, data.edit_field, data.edit_value)

    def remove_attack(info: GraphQLResolveInfo, input: Optional[dict] = None):
        data = AttackRemove.model_validate(input or {})
        return mutations.remove_attack(data.fast_or_special, data.name)

    def add_type(info: GraphQLResolveInfo, input: Optional[dict] = None):
        return mutations.add_type(TypeInput.model_validate(input or {}).name)

    def edit_type(info: GraphQLResolveInfo, input: Optional[dict] = None):
        data = TypeEdit.model_validate(input or {})
        return mutations.edit_type(data.name, data.new_name)

    def remove_type(info: GraphQLResolveInfo, input: Optional[dict] = None):
        return mutations.remove_type(TypeInput.model_validate(input or {}).name)

    return {
        # Query
        "Pokemons": lambda info: queries.list_pokemon(),
        "Pokemon": pokemon,
        "Types": lambda info: queries.list_types(),
        "Attacks": lambda info: queries.list_attacks(),
        "Attack": attack,
        "PokemonByType": pokemon_by_type,
        "PokemonByAttack": pokemon_by_attack,
        # Mutation
        "addPokemon": add_pokemon,
        "editPokemon": edit_pokemon,
        "removePokemon": remove_pokemon,
        "addAttack": add_attack,
        "editAttack": edit_attack,
        "removeAttack": remove_attack,
        "addType": add_type,
        "editType": edit_type,
        "removeType": remove_type,
    }
