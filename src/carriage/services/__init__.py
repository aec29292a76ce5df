"""
Business services for Carriage.

Service functions take the ``Store`` (and ``Config`` where they need it)
explicitly; FastAPI routers in ``api/`` are thin wrappers around them.
"""

__all__: list[str] = []
