"""Create a user (USER or MANAGER) in the configured database.

Usage:
    python -m scripts.create_user <email> <name> [--manager] [--password PASSWORD]
If --password is omitted, a random one is printed.
"""

import argparse
import asyncio
import secrets
import sys

from workorders.domain.enums import UserRole
from workorders.infrastructure.persistence import database
from workorders.infrastructure.persistence.repositories import UserRepository


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a work-order user")
    parser.add_argument("email")
    parser.add_argument("name")
    parser.add_argument("--manager", action="store_true", help="Give the MANAGER role")
    parser.add_argument("--password", default=None)
    return parser.parse_args(argv)


async def main(argv: list[str]) -> None:
    """Create the user inside one transaction and print its id."""
    args = _parse_args(argv)
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL is not configured", file=sys.stderr)
        sys.exit(1)
    password = args.password or secrets.token_urlsafe(12)
    role = UserRole.MANAGER if args.manager else UserRole.USER

    async with database.AsyncSessionLocal() as session:
        async with session.begin():
            user = await UserRepository(session).create_user(
                name=args.name,
                email=args.email,
                password=password,
                role=role,
            )
    print(f"Created user: {user.id} ({user.email}) role={user.role}")
    if not args.password:
        print(f"Password: {password}")
    await database.engine.dispose()


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1:]))
