#!/usr/bin/env python3
"""
Deactivate (soft-delete) a user by id.

Usage:
  python scripts/deactivate_user.py --id 1b4e28ba-2fa1-11d2-883f-0016d3cca427
"""
from __future__ import annotations

import argparse
import sys

from users_api.services.provider import build_user_service
from users_api.core.config import get_settings
from users_api.core.logging import configure_logging
from users_api.services.user_service import UserFailure


def main() -> None:
    ap = argparse.ArgumentParser(description="Deactivate a user")
    ap.add_argument("--id", required=True, dest="user_id", help="User id")
    args = ap.parse_args()

    configure_logging(get_settings().log_level)
    failure = build_user_service().deactivate_user(args.user_id.strip())
    if isinstance(failure, UserFailure):
        raise SystemExit(failure.message)
    print(f"OK: user {args.user_id} deactivated")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
