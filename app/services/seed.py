"""
Idempotent seed: reference LinkedIn profiles, skills, and the default identity.

Safe to run any number of times against any partial prior state. The default
identity is pinned to DEFAULT_USER_ID because the browser extension stores that
id and attaches it to every prospect it creates.
"""

import enum
import logging
from dataclasses import dataclass

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import Conflict
from app.models import LinkedInProfile, Skill, User
from app.models.user import Role

logger = logging.getLogger(__name__)

LINKEDIN_PROFILES: list[dict[str, str | None]] = [
    {"name": "Sabeeh - CTO", "niche": None},
    {"name": "Haris - CEO", "niche": None},
    {"name": "Shuja - Dev", "niche": None},
    {"name": "Muhammad Abuzar - BD", "niche": None},
]

SKILLS: list[str] = [
    "Python",
    "JavaScript",
    "TypeScript",
    "React",
    "Next.js",
    "Node.js",
    "Django",
    "FastAPI",
    "Flutter",
    "React Native",
    "AI/ML",
    "DevOps",
    "AWS",
    "UI/UX Design",
    "Shopify",
    "WordPress",
]

DEFAULT_USER_ID = "00000000-0000-4000-8000-000000000001"
DEFAULT_USER_EMAIL = "admin@prospectmanager.com"
# Used when DEFAULT_USER_EMAIL already belongs to a user with another id.
ALTERNATE_USER_EMAIL = "extension@prospectmanager.com"
DEFAULT_USER_NAME = "Admin User"
DEFAULT_USER_ROLE = Role.ADMIN.value


class DefaultUserAction(str, enum.Enum):
    KEEP = "keep"
    CREATE = "create"
    CREATE_WITH_ALTERNATE_EMAIL = "create_with_alternate_email"


@dataclass
class SeedReport:
    profiles: list[str]
    skills_inserted: int
    skills_total: int
    default_user_action: DefaultUserAction
    default_user_id: str
    default_user_email: str


def plan_default_user(id_exists: bool, email_taken: bool) -> DefaultUserAction:
    """Pick the reconciliation branch for the default identity."""
    if id_exists:
        return DefaultUserAction.KEEP
    if email_taken:
        return DefaultUserAction.CREATE_WITH_ALTERNATE_EMAIL
    return DefaultUserAction.CREATE


def seed_linkedin_profiles(session: Session) -> list[LinkedInProfile]:
    """Upsert each profile by name, in list order. Existing rows are left as they are."""
    profiles: list[LinkedInProfile] = []
    for entry in LINKEDIN_PROFILES:
        profile = (
            session.query(LinkedInProfile)
            .filter(LinkedInProfile.name == entry["name"])
            .first()
        )
        if profile is None:
            profile = LinkedInProfile(name=entry["name"], niche=entry["niche"])
            session.add(profile)
            session.flush()
        profiles.append(profile)
    return profiles


def seed_skills(session: Session) -> tuple[int, int]:
    """Insert skills whose names are not present yet. Returns (inserted, total candidates)."""
    existing = {
        name
        for (name,) in session.query(Skill.name).filter(Skill.name.in_(SKILLS)).all()
    }
    missing = [name for name in dict.fromkeys(SKILLS) if name not in existing]
    session.add_all([Skill(name=name) for name in missing])
    session.flush()
    return len(missing), len(SKILLS)


def ensure_default_user(session: Session) -> tuple[DefaultUserAction, User]:
    """Make sure a user exists at DEFAULT_USER_ID. No password hash is set."""
    existing = session.get(User, DEFAULT_USER_ID)
    email_owner = None
    if existing is None:
        email_owner = (
            session.query(User)
            .filter(func.lower(User.email) == DEFAULT_USER_EMAIL)
            .first()
        )
    action = plan_default_user(existing is not None, email_owner is not None)

    if action is DefaultUserAction.KEEP:
        return action, existing

    email = (
        ALTERNATE_USER_EMAIL
        if action is DefaultUserAction.CREATE_WITH_ALTERNATE_EMAIL
        else DEFAULT_USER_EMAIL
    )
    user = User(
        id=DEFAULT_USER_ID,
        email=email,
        name=DEFAULT_USER_NAME,
        role=DEFAULT_USER_ROLE,
        password_hash=None,
    )
    session.add(user)
    session.flush()
    return action, user


def run_seed(session: Session) -> SeedReport:
    """
    Run all seed steps in one transaction and commit once.

    Any error rolls the whole run back and propagates to the caller.
    """
    try:
        profiles = seed_linkedin_profiles(session)
        logger.info("LinkedIn profiles seeded: %s", ", ".join(p.name for p in profiles))

        inserted, total = seed_skills(session)
        logger.info("Skills seeded: %s new of %s", inserted, total)

        action, user = ensure_default_user(session)
        if action is DefaultUserAction.KEEP:
            logger.info("Default user already exists (id=%s); skipping.", user.id)
        else:
            logger.info(
                "Default user created (id=%s, email=%s, role=%s)",
                user.id,
                user.email,
                user.role,
            )
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise Conflict("Seed hit a unique constraint; another writer got there first.") from e
    except Exception:
        session.rollback()
        raise

    return SeedReport(
        profiles=[p.name for p in profiles],
        skills_inserted=inserted,
        skills_total=total,
        default_user_action=action,
        default_user_id=user.id,
        default_user_email=user.email,
    )
