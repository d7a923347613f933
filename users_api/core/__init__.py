"""
Core utilities shared across the users API.

This package hosts configuration helpers (env vars), logging setup, the
e-mail adapter and the HTTP error-body handlers. Services and routers depend
on these primitives instead of reading os.environ or building error payloads
themselves.
"""
