"""
DynamoDB data access for Carriage.

Every entity lives in its own table keyed by ``id``; ``TableRepository``
provides the table-agnostic operations and ``Store`` groups one repository
per table.
"""

from carriage.db.conditions import Condition
from carriage.db.repository import TableRepository
from carriage.db.store import Store, get_store

__all__ = ["Condition", "Store", "TableRepository", "get_store"]
