"""
Core business logic package for Carriage.

Models, DynamoDB data access, authentication and services live here.
The FastAPI routers in src/api/ are thin wrappers that call into carriage/.
"""

__all__: list[str] = []
