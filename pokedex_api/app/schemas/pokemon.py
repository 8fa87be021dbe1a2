"""
Pydantic models for Pokémon records.

Attributes use snake_case; the camelCase names seen in the seed file and
in the GraphQL schema are declared as aliases.  ``wire_names`` maps those
external names back to attribute names so the gateway and the edit
mutation can address fields the way clients spell them.

Models are created without assignment validation: an edit stores the
value exactly as given, even when it does not match the declared type.
"""

from typing import Dict, List, Optional, Type

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .attack import AttackSet


class Weight(BaseModel):
    minimum: Optional[str] = None
    maximum: Optional[str] = None


class Height(BaseModel):
    minimum: Optional[str] = None
    maximum: Optional[str] = None


class EvolutionRequirement(BaseModel):
    amount: Optional[int] = None
    name: Optional[str] = None


class Evolution(BaseModel):
    """Weak reference to another Pokémon by id and name."""

    id: Optional[str] = None
    name: Optional[str] = None


class Pokemon(BaseModel):
    """A Pokémon record as held in the catalog store."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: Optional[str] = None
    classification: Optional[str] = None
    types: Optional[List[str]] = None
    resistant: Optional[List[str]] = None
    weaknesses: Optional[List[str]] = Field(
        None,
        validation_alias=AliasChoices("weaknesses", "weakness"),
        serialization_alias="weakness",
    )
    weight: Optional[Weight] = None
    height: Optional[Height] = None
    flee_rate: Optional[float] = Field(None, alias="fleeRate")
    evolution_requirements: Optional[EvolutionRequirement] = Field(None, alias="evolutionRequirements")
    evolutions: Optional[List[Evolution]] = None
    previous_evolutions: Optional[List[Evolution]] = Field(
        None,
        validation_alias=AliasChoices("Previous evolution(s)", "previousEvolutions"),
        serialization_alias="previousEvolutions",
    )
    max_cp: Optional[int] = Field(None, alias="maxCP")
    max_hp: Optional[int] = Field(None, alias="maxHP")
    attacks: Optional[AttackSet] = None


class PokemonCreate(BaseModel):
    """Schema for adding a Pokémon; only these three fields are set."""

    id: Optional[str] = Field(None, examples=["152"])
    name: Optional[str] = Field(None, examples=["Chikorita"])
    classification: Optional[str] = Field(None, examples=["Leaf Pokémon"])


class PokemonEdit(BaseModel):
    """Schema for overwriting one field of the first Pokémon with ``name``."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = None
    edit_field: Optional[str] = Field(None, alias="editField", examples=["maxCP"])
    edit_value: Optional[str] = Field(None, alias="editValue", examples=["600"])


class PokemonRemove(BaseModel):
    name: Optional[str] = None


def wire_names(model: Type[BaseModel]) -> Dict[str, str]:
    """Return a mapping of external (alias) field names to attribute names."""
    return {
        (info.serialization_alias or info.alias or name): name
        for name, info in model.model_fields.items()
    }
