"""Reset brute force detection for a realm or a single user.

Examples:
    python scripts/attack_detection.py clear --realm master
    python scripts/attack_detection.py clear-user --realm master --user-id afab8ba7-...
    python scripts/attack_detection.py status --realm master --user-id afab8ba7-...
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

from keycloak_admin import Keycloak, KeycloakError, Settings, load_settings

logger = logging.getLogger("attack_detection")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Keycloak attack detection helper")
    parser.add_argument("--kc-url", help="Keycloak base URL (default: KEYCLOAK_URL)")
    parser.add_argument("-v", "--verbose", action="store_true")

    sub = parser.add_subparsers(dest="cmd")

    clear = sub.add_parser("clear", help="Clear login failures for all users")
    clear.add_argument("--realm", default="master")

    clear_user = sub.add_parser("clear-user", help="Clear login failures for one user")
    clear_user.add_argument("--realm", default="master")
    clear_user.add_argument("--user-id", required=True)

    status = sub.add_parser("status", help="Show login failure state of one user")
    status.add_argument("--realm", default="master")
    status.add_argument("--user-id", required=True)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="[%(name)s] %(message)s")

    if not args.cmd:
        parser.print_help()
        return 0

    try:
        settings: Settings = load_settings()
        if args.kc_url:
            settings.base_url = args.kc_url.rstrip("/")
        attack_detection = Keycloak.from_settings(settings).attack_detection()

        if args.cmd == "clear":
            attack_detection.clear(args.realm)
        elif args.cmd == "clear-user":
            attack_detection.clear_user(args.realm, args.user_id)
        elif args.cmd == "status":
            status = attack_detection.user_status(args.realm, args.user_id)
            print(
                f"failures={status.num_failures} disabled={status.disabled} "
                f"last_ip={status.last_ip_failure}"
            )
    except KeycloakError as e:
        logger.error("%s failed: %s", args.cmd, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
