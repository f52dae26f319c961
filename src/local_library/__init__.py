"""
Local Library catalog package.

Key Components:
- models: pure formatting of author and book instance records
- database: SQLAlchemy schema, sessions and the record store
- pages: the author list and book status request handlers
- resources: the pages exposed as read-only resources
- config: configuration management with Pydantic v2
"""

__version__ = "0.1.0"
