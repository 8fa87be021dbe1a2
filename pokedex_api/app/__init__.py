"""
Application package.

``core`` holds configuration, logging, errors and the in-memory
catalog store; ``schemas`` the pydantic record and input models;
``services`` the query and mutation layers; ``gateway`` the GraphQL
schema and execution; ``api`` the HTTP routes.  ``main`` ties them
together into the FastAPI application.
"""

from .main import app  # noqa: F401
