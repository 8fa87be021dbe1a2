"""
Pydantic models for attacks.

An ``Attack`` lives either inside a Pokémon's ``AttackSet`` or in one of
the catalog-wide attack buckets (``fast``/``special``).  The input models
mirror the GraphQL ``attackInput``, ``attackEdit`` and ``attackRemove``
input objects; ``fastOrSpecial`` names the bucket.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Attack(BaseModel):
    """A single attack record."""

    name: Optional[str] = None
    type: Optional[str] = None
    damage: Optional[int] = None


class AttackSet(BaseModel):
    """The two attack lists owned by one Pokémon."""

    fast: List[Attack] = Field(default_factory=list)
    special: List[Attack] = Field(default_factory=list)


class AttackCreate(BaseModel):
    """Schema for adding an attack to a bucket."""

    model_config = ConfigDict(populate_by_name=True)

    fast_or_special: Optional[str] = Field(None, alias="fastOrSpecial", examples=["fast"])
    name: Optional[str] = Field(None, examples=["Ember"])
    type: Optional[str] = Field(None, examples=["Fire"])
    damage: Optional[int] = Field(None, examples=[10])


class AttackEdit(BaseModel):
    """Schema for changing one field of a bucket attack."""

    model_config = ConfigDict(populate_by_name=True)

    fast_or_special: Optional[str] = Field(None, alias="fastOrSpecial")
    name: Optional[str] = None
    edit_field: Optional[str] = Field(None, alias="editField", examples=["damage"])
    edit_value: Optional[str] = Field(None, alias="editValue", examples=["45"])


class AttackRemove(BaseModel):
    """Schema for removing an attack from a bucket."""

    model_config = ConfigDict(populate_by_name=True)

    fast_or_special: Optional[str] = Field(None, alias="fastOrSpecial")
    name: Optional[str] = None
