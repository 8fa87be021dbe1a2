"""
Execution of GraphQL documents against the catalog store.

``execute_operation`` parses and validates a document against the
catalog schema, then executes it with the root value from
``build_root``.  Unknown operations, unknown fields and arguments that
cannot be coerced to their declared scalar types are rejected before
any resolver runs.  Execution holds the store lock so that one
operation always completes before the next starts.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from graphql import (
    ExecutionResult,
    GraphQLError,
    OperationType,
    execute_sync,
    get_operation_ast,
    parse,
    validate,
)

from pokedex_api.app.core.errors import PokedexError
from pokedex_api.app.core.store import CatalogStore
from pokedex_api.app.gateway.resolvers import build_root, catalog_field_resolver
from pokedex_api.app.gateway.schema import schema

logger = logging.getLogger(__name__)


@dataclass
class GatewayResult:
    """An execution result together with the HTTP status it maps to."""

    result: ExecutionResult
    status_code: int = 200


def _rejected(message: str, status_code: int = 400) -> GatewayResult:
    return GatewayResult(ExecutionResult(data=None, errors=[GraphQLError(message)]), status_code)


def execute_operation(
    store: CatalogStore,
    query: Optional[str],
    variables: Optional[Dict[str, Any]] = None,
    operation_name: Optional[str] = None,
    read_only: bool = False,
) -> GatewayResult:
    """Run one GraphQL operation.

    Parameters
    ----------
    store : CatalogStore
        Store the resolvers read and mutate.
    query : Optional[str]
        The GraphQL document.
    variables : Optional[Dict[str, Any]]
        Variable values, coerced to their declared types before
        execution.
    operation_name : Optional[str]
        Operation to run when the document defines several.
    read_only : bool
        Reject anything other than a query operation with status 405
        (used for ``GET`` requests).

    Returns
    -------
    GatewayResult
        Status 400 when the document is missing, malformed, invalid
        against the schema or its variables cannot be coerced; 200
        otherwise, with resolver errors reported inside the result.
    """
    if not query:
        return _rejected("Must provide query string.")

    try:
        document = parse(query)
    except GraphQLError as error:
        logger.debug("Rejected unparsable document: %s", error.message)
        return GatewayResult(ExecutionResult(data=None, errors=[error]), 400)

    validation_errors = validate(schema, document)
    if validation_errors:
        logger.debug("Rejected invalid document: %s", [e.message for e in validation_errors])
        return GatewayResult(ExecutionResult(data=None, errors=validation_errors), 400)

    if read_only:
        operation = get_operation_ast(document, operation_name)
        if operation is not None and operation.operation != OperationType.QUERY:
            return _rejected(
                f"Can only perform a {operation.operation.value} operation from a POST request.",
                405,
            )

    with store.lock:
        result = execute_sync(
            schema,
            document,
            root_value=build_root(store),
            variable_values=variables,
            operation_name=operation_name,
            field_resolver=catalog_field_resolver,
        )

    if result.data is None and result.errors:
        # Nothing ran: variables failed coercion or no operation was selected.
        return GatewayResult(result, 400)
    return GatewayResult(result)


def format_error(error: GraphQLError) -> Dict[str, Any]:
    """Render an error, tagging catalog errors with their code."""
    formatted = dict(error.formatted)
    if isinstance(error.original_error, PokedexError):
        formatted["extensions"] = {
            **formatted.get("extensions", {}),
            "code": error.original_error.code,
        }
    return formatted


def format_result(result: ExecutionResult) -> Dict[str, Any]:
    """Render an execution result as a GraphQL response body."""
    payload: Dict[str, Any] = {}
    if result.errors:
        payload["errors"] = [format_error(error) for error in result.errors]
    if result.data is not None or not result.errors:
        payload["data"] = result.data
    return payload
