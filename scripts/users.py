"""List or search the users of a realm.

Examples:
    python scripts/users.py --realm demo
    python scripts/users.py --realm demo --username alice --exact
"""
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from keycloak_admin import Criteria, Keycloak, KeycloakError, load_settings

logger = logging.getLogger("users")


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="List Keycloak users")
    parser.add_argument("--realm", default="master")
    parser.add_argument("--search", help="Substring matched against username, name and email")
    parser.add_argument("--username")
    parser.add_argument("--email")
    parser.add_argument("--exact", action="store_true", help="Exact match for --username/--email")
    parser.add_argument("--max", type=int, default=100)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")

    criteria = Criteria(
        search=args.search,
        username=args.username,
        email=args.email,
        exact=True if args.exact else None,
        max=args.max,
    )

    try:
        users = Keycloak.from_settings(load_settings()).users().search(args.realm, criteria)
    except KeycloakError as e:
        logger.error("Listing users failed: %s", e)
        return 1

    for user in users:
        state = "enabled" if user.enabled else "disabled"
        print(f"{user.id}\t{user.username}\t{user.email or '-'}\t{state}")
    logger.info("%d user(s) in realm '%s'", users.count(), args.realm)
    return 0


if __name__ == "__main__":
    sys.exit(main())
