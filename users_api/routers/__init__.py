"""
FastAPI routers grouped by resource.

Each file inside this package exposes an APIRouter that is included in the
application built by app.create_app. Routers only translate HTTP to service
calls and service failures to status codes.
"""
