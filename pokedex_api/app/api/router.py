"""
Top-level router for the API.

The GraphQL endpoint is the only route; it is mounted without a
version prefix at ``/graphql``.
"""

from fastapi import APIRouter

from .endpoints import catalog

router = APIRouter()

router.include_router(catalog.router, tags=["graphql"])
