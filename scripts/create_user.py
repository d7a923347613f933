#!/usr/bin/env python3
"""
Register a new user directly in the configured database.

Usage:
  python scripts/create_user.py --email john@example.com --name "John Doe"
"""
from __future__ import annotations

import argparse
import sys

from users_api.services.provider import build_user_service
from users_api.core.config import get_settings
from users_api.core.logging import configure_logging
from users_api.db.create_tables import create_all
from users_api.services.user_service import UserFailure


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a user")
    ap.add_argument("--email", required=True, help="E-mail address (must be unique)")
    ap.add_argument("--name", required=True, help="Display name")
    args = ap.parse_args()

    name = (args.name or "").strip()
    if not name:
        raise SystemExit("Name is required")

    configure_logging(get_settings().log_level)
    create_all()
    result = build_user_service().create_user(args.email.strip(), name)
    if isinstance(result, UserFailure):
        raise SystemExit(result.message)
    print("OK: user created")
    print(f"  ID: {result.id}")
    print(f"  Email: {result.email}")
    print(f"  Name: {result.name}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
