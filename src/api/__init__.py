"""
HTTP layer for Carriage.

Routers here are thin wrappers: they declare the role each route requires,
parse the request, and call into ``carriage.services`` or the table
repositories. Errors are translated to HTTP responses in ``api.app`` only.
"""

__all__: list[str] = []
