# storefront/adapters/persistence/__init__.py
"""
Persistence Adapters.

Implements the Repository ports defined in the Core Domain, translating
between Domain Entities and each storage medium:
- Sql*Repository: relational store through SQLAlchemy Core.
- Csv*Repository: append-only flat file guarded by a single lock.
- InMemory*Repository: process-local reference implementation.
"""

from .csv_repositories import CsvOrderRepository, CsvProductRepository
from .memory import InMemoryOrderRepository, InMemoryProductRepository
from .sql import SqlOrderRepository, SqlProductRepository

__all__ = [
    "CsvOrderRepository",
    "CsvProductRepository",
    "InMemoryOrderRepository",
    "InMemoryProductRepository",
    "SqlOrderRepository",
    "SqlProductRepository",
]
