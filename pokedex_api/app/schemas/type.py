"""
Pydantic models for Pokémon type (category) mutations.

Types are stored as bare strings, so only the mutation inputs need a
schema.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TypeInput(BaseModel):
    """Schema naming a single type, used by ``addType`` and ``removeType``."""

    name: Optional[str] = Field(None, examples=["Ghost"])


class TypeEdit(BaseModel):
    """Schema for renaming a type in place."""

    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(None, examples=["Ghost"])
    new_name: Optional[str] = Field(None, alias="newName", examples=["Dark"])
