"""
Pydantic schema for GraphQL-over-HTTP request bodies.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class GraphQLRequest(BaseModel):
    """Body of a ``POST /graphql`` request."""

    model_config = ConfigDict(populate_by_name=True)

    query: Optional[str] = Field(None, examples=["{ Pokemon(name: \"Pikachu\") { id maxCP } }"])
    variables: Optional[Dict[str, Any]] = None
    operation_name: Optional[str] = Field(None, alias="operationName")
