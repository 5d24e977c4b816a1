"""
db/ - Database Layer
====================
Owns the PostgreSQL connection pool, schema bootstrap, and the
query-execution capability that every repository is built on.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""

from db.connection import Database, QueryExecutor

__all__ = ["Database", "QueryExecutor"]
