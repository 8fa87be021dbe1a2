"""
GraphQL endpoint for the catalog.

``POST /graphql`` accepts a JSON body with ``query``, ``variables`` and
``operationName``.  ``GET /graphql`` accepts the same values as query
parameters (``variables`` JSON-encoded) and only runs query
operations; without a ``query`` parameter it serves the GraphiQL
explorer to browsers when enabled.

Responses always carry a GraphQL body (``data`` and/or ``errors``).
The status code is 400 when the document could not be run at all, 405
for a mutation sent over ``GET`` and 200 otherwise.
"""

import json
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from pokedex_api.app.api.graphiql import render_graphiql
from pokedex_api.app.core.config import settings
from pokedex_api.app.core.store import CatalogStore, get_store
from pokedex_api.app.gateway import execute_operation, format_result
from pokedex_api.app.schemas.gateway import GraphQLRequest

router = APIRouter()


def _parse_variables(raw: Optional[str]) -> Optional[Dict[str, Any]]:
    if not raw:
        return None
    try:
        variables = json.loads(raw)
    except json.JSONDecodeError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Variables are invalid JSON.")
    if variables is not None and not isinstance(variables, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Variables must be a JSON object.")
    return variables


@router.post("/graphql")
async def graphql_post(
    payload: GraphQLRequest,
    store: CatalogStore = Depends(get_store),
) -> JSONResponse:
    """Execute a query or mutation."""
    outcome = execute_operation(store, payload.query, payload.variables, payload.operation_name)
    return JSONResponse(format_result(outcome.result), status_code=outcome.status_code)


@router.get("/graphql")
async def graphql_get(
    request: Request,
    query: Optional[str] = Query(None),
    variables: Optional[str] = Query(None),
    operation_name: Optional[str] = Query(None, alias="operationName"),
    store: CatalogStore = Depends(get_store),
):
    """Execute a query operation, or serve GraphiQL to a browser."""
    if query is None and settings.graphiql and "text/html" in request.headers.get("accept", ""):
        return HTMLResponse(render_graphiql(settings.project_name))
    outcome = execute_operation(
        store,
        query,
        _parse_variables(variables),
        operation_name,
        read_only=True,
    )
    return JSONResponse(format_result(outcome.result), status_code=outcome.status_code)
