"""
High-level use cases for the users API.

Each service module orchestrates repositories/adapters to implement business
rules (create user, rename, deactivate, notify).

Routers (FastAPI endpoints) call these services instead of touching the
database or the mailer directly.
"""
