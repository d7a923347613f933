"""
Persistence adapters.

Services depend on the UserRepository port (base.py); sql_repository.py is the
SQLAlchemy-backed implementation used by the app and the CLI scripts.
"""
