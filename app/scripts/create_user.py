"""
Create a user (e.g. a dashboard admin or a profile-bound teammate). Run from project root:
  python -m app.scripts.create_user EMAIL NAME [--role ROLE] [--username U] [--password P] [--profile NAME]
Example:
  python -m app.scripts.create_user shuja@example.com "Shuja" --role profile_user --profile "Shuja - Dev"
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.errors import ServiceError
from app.models import LinkedInProfile
from app.models.user import Role
from app.schemas.users import UserCreate
from app.services.users import create_user


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Create a Prospect Manager user (no registration UI)."
    )
    parser.add_argument("email", help="Email address (stored lowercased)")
    parser.add_argument("name", help="Display name")
    parser.add_argument("--role", default=Role.USER.value, choices=[r.value for r in Role])
    parser.add_argument("--username", default=None, help="Optional dashboard username")
    parser.add_argument("--password", default=None, help="Optional dashboard password")
    parser.add_argument(
        "--profile", default=None, help="LinkedIn profile name (required for profile_user)"
    )
    args = parser.parse_args()

    db = SessionLocal()
    try:
        profile_id = None
        if args.profile:
            profile = (
                db.query(LinkedInProfile)
                .filter(LinkedInProfile.name == args.profile)
                .first()
            )
            if profile is None:
                print(f"LinkedIn profile '{args.profile}' not found.", file=sys.stderr)
                return 1
            profile_id = profile.id
        body = UserCreate(
            email=args.email,
            name=args.name,
            username=args.username,
            role=Role(args.role),
            password=args.password,
            linkedin_profile_id=profile_id,
        )
        user = create_user(db, body)
        print(f"Created user '{user.email}' (id={user.id}) with role '{user.role}'.")
        return 0
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
