"""
API package containing the HTTP routes.

The catalog is served through a single GraphQL endpoint.  The
``router`` module aggregates the endpoint modules under
``api/endpoints`` and is included by the application factory.
"""
