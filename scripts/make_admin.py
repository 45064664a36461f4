#!/usr/bin/env python3
"""Grant (or revoke) admin rights for an existing user.

No endpoint can make a user an admin, and only admins can write posts,
so the first admin is promoted from the command line.

Usage:
  DATABASE_URL=... JWT_TOKEN_KEY=... python scripts/make_admin.py ada@example.com
  python scripts/make_admin.py ada@example.com --revoke
"""

import argparse
import sys

from blog_api.database.session import get_sessionmaker
from blog_api.models.user import User


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email", help="Email of the user to update")
    parser.add_argument("--revoke", action="store_true", help="Remove admin rights instead")
    args = parser.parse_args()

    db = get_sessionmaker()()
    try:
        user = db.query(User).filter(User.email == args.email).first()
        if not user:
            print(f"ERROR: no user with email {args.email}")
            sys.exit(1)

        user.is_admin = not args.revoke
        db.commit()
        state = "is now" if user.is_admin else "is no longer"
        print(f"{user.username} ({user.email}) {state} an admin")
    finally:
        db.close()


if __name__ == "__main__":
    main()
