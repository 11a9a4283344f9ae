"""Command-line interface for the user management service."""

from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import Sequence

from usermanagement import UserService, create_service, load_settings, resolve_config_path

logger = logging.getLogger("usermanagement.main")

CONFIG_ENV_VAR = "USER_MANAGEMENT_CONFIG"


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="User management utilities")
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to the YAML settings file (defaults to {CONFIG_ENV_VAR} or config/settings.yaml)",
    )
    subparsers = parser.add_subparsers(dest="command")

    parser.set_defaults(command="console")

    subparsers.add_parser("console", help="Launch the interactive user console")
    subparsers.add_parser("report", help="Print the user report and exit")

    args_list = list(argv) if argv is not None else sys.argv[1:]
    return parser.parse_args(args_list)


def _build_service(config: str | None) -> UserService:
    config_path = resolve_config_path(config or os.getenv(CONFIG_ENV_VAR))
    settings = load_settings(config_path)
    logger.info("Loaded settings from %s (minimum age %s)", config_path, settings.minimum_age)
    return create_service(settings)


def _run_console(service: UserService) -> None:
    """Provide an interactive console over an in-memory user store."""

    print("User Management Console")
    print("Press Ctrl+C at any time to exit.\n")

    try:
        while True:
            print("Select an option:")
            print("  1) List all users")
            print("  2) Add a new user")
            print("  3) Deactivate a user")
            print("  4) Show user report")
            print("  5) Exit")

            choice = input("Enter choice [1-5]: ").strip()

            if choice == "1":
                _list_users(service)
            elif choice == "2":
                _add_user(service)
            elif choice == "3":
                _deactivate_user(service)
            elif choice == "4":
                print(service.generate_user_report())
            elif choice == "5":
                print("Goodbye!")
                return
            else:
                print("Invalid selection. Please choose a number from the menu.\n")

            print()
    except (KeyboardInterrupt, EOFError):
        print("\nExiting user console.")


def _list_users(service: UserService) -> None:
    users = service.list_users()
    if not users:
        print("No users are currently registered.")
        return

    print(f"{len(users)} user(s) found:")
    print(f"{'ID':<32}  {'Name':<24}  {'Email':<32}  {'Status':<8}  Created")
    print("-" * 120)
    for user in users:
        created = user.created_at.strftime("%Y-%m-%d %H:%M:%S %Z")
        admin_flag = " (admin)" if user.is_admin else ""
        print(
            f"{user.id:<32}  {user.name:<24}  {user.email:<32}  {user.status.value:<8}  {created}{admin_flag}"
        )


def _add_user(service: UserService) -> None:
    print("\nCreate a new user (leave the name blank to cancel).")
    name = input("Name: ").strip()
    if not name:
        print("User creation cancelled.")
        return

    email = input("Email address: ").strip()
    age_text = input("Age: ").strip()
    try:
        age = int(age_text) if age_text else 0
    except ValueError:
        print(f"Failed to create user: {age_text!r} is not a valid age")
        return
    is_admin = input("Administrator? [y/N]: ").strip().lower() in {"y", "yes"}

    try:
        user = service.create_user(name, email, age, is_admin=is_admin)
    except ValueError as exc:
        print(f"Failed to create user: {exc}")
        return

    print(f"Created user {user.id}: {user.name} <{user.email}>")


def _deactivate_user(service: UserService) -> None:
    user_id = input("User ID: ").strip()
    if service.deactivate_user(user_id):
        print(f"User {user_id} is now inactive.")
    else:
        print(f"User {user_id} could not be deactivated (unknown or administrator).")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for CLI usage."""

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    args = _parse_args(argv)
    try:
        service = _build_service(args.config)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.command == "console":
        _run_console(service)
    elif args.command == "report":
        print(service.generate_user_report())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
