"""
GraphQL gateway: schema declaration, root resolvers and execution.
"""

from .executor import GatewayResult, execute_operation, format_result
from .schema import schema

__all__ = ["GatewayResult", "execute_operation", "format_result", "schema"]
