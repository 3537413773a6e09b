"""Todo Store - a small CRUD service over a single Todo table.

This package provides the store layer (SQLAlchemy), the Todo service
functions, an HTTP client for the service, and the command-line entry point.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
