"""
Service layer for the catalog.

``QueryService`` holds the read-only lookups and ``MutationService``
the add/edit/remove operations.  Both are constructed around a
``CatalogStore`` so the gateway can hand each request the store owned
by the running application.
"""

from .mutation_service import MutationService
from .query_service import QueryService

__all__ = ["MutationService", "QueryService"]
