"""
Pydantic schema definitions for catalog records and mutation inputs.

Record models (``Pokemon``, ``Attack`` and their nested parts) are the
objects held live in the catalog store.  Input models mirror the
GraphQL input objects and are used by the gateway to unpack mutation
arguments before calling the services.
"""
