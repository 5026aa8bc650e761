"""
Set the dashboard password (and optionally the username) for an existing user. Run from project root:
  python -m app.scripts.set_admin_password PASSWORD [--email EMAIL] [--username USERNAME]
Example:
  python -m app.scripts.set_admin_password 'a-strong-password' --username admin
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.errors import ServiceError
from app.models import User
from app.services.auth import normalize_email
from app.services.seed import DEFAULT_USER_EMAIL
from app.services.users import set_password


def main() -> int:
    parser = argparse.ArgumentParser(description="Set a user's dashboard password.")
    parser.add_argument("password", help="New password")
    parser.add_argument("--email", default=DEFAULT_USER_EMAIL, help="Account email")
    parser.add_argument("--username", default=None, help="Also set the login username")
    args = parser.parse_args()

    email = normalize_email(args.email)
    db = SessionLocal()
    try:
        user = db.query(User).filter(User.email == email).first()
        if user is None:
            print(f"No user found with email: {email}", file=sys.stderr)
            return 1
        set_password(db, user, args.password, username=args.username)
        print(f"Password set for {email}.")
        if user.username:
            print(f"You can log in with '{email}' or '{user.username}'.")
        return 0
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
