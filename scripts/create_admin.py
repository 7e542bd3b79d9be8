"""Create an additional admin account.

Usage: python scripts/create_admin.py --name "Second Admin" --email admin2@bookstore.com --password admin456
"""

import argparse
import os
import sys

# Add parent dir to path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bookstore.application.services.auth_service import create_user
from bookstore.config import get_settings
from bookstore.core.exceptions import DuplicateEntityException
from bookstore.domain.models.user import User
from bookstore.infrastructure.database import Database
from bookstore.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create an admin user")
    parser.add_argument("--name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", required=True)
    parser.add_argument("--phone", default=None)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if len(args.password) < 6:
        print("Password must be at least 6 characters long")
        return 1

    settings = get_settings()
    database = Database(settings)
    database.create_tables()
    try:
        with database.session() as db:
            users = SQLAlchemyUserRepository(db, User)
            try:
                user = create_user(
                    users,
                    settings,
                    name=args.name,
                    email=args.email,
                    password=args.password,
                    role="admin",
                    phone=args.phone,
                )
            except DuplicateEntityException:
                print(f"User with email {args.email} already exists")
                return 1
    finally:
        database.dispose()

    print(f"Admin user created: {user.email} (id={user.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
