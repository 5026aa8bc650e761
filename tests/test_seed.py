"""Tests for app.services.seed and the app.seed CLI: idempotent bootstrap of reference data."""

import unittest
from unittest.mock import MagicMock, patch

from sqlalchemy import func

from app.core.errors import Conflict
from app.models import LinkedInProfile, Skill, User
from app.services.seed import (
    ALTERNATE_USER_EMAIL,
    DEFAULT_USER_EMAIL,
    DEFAULT_USER_ID,
    LINKEDIN_PROFILES,
    SKILLS,
    DefaultUserAction,
    plan_default_user,
    run_seed,
)
from db_helpers import add_profile, add_user, make_session_factory


class TestPlanDefaultUser(unittest.TestCase):
    """Reconciliation branches over (id exists, email taken elsewhere)."""

    def test_id_exists_keeps(self) -> None:
        self.assertEqual(plan_default_user(True, False), DefaultUserAction.KEEP)
        self.assertEqual(plan_default_user(True, True), DefaultUserAction.KEEP)

    def test_email_taken_uses_alternate(self) -> None:
        self.assertEqual(
            plan_default_user(False, True),
            DefaultUserAction.CREATE_WITH_ALTERNATE_EMAIL,
        )

    def test_clean_store_creates(self) -> None:
        self.assertEqual(plan_default_user(False, False), DefaultUserAction.CREATE)


class TestSeedEmptyStore(unittest.TestCase):
    """Seeding an empty database creates every reference row and the default user."""

    def setUp(self) -> None:
        self.Session = make_session_factory()
        self.db = self.Session()

    def tearDown(self) -> None:
        self.db.close()

    def test_creates_default_user_at_fixed_id(self) -> None:
        report = run_seed(self.db)
        self.assertEqual(report.default_user_action, DefaultUserAction.CREATE)
        user = self.db.get(User, DEFAULT_USER_ID)
        self.assertIsNotNone(user)
        self.assertEqual(user.email, DEFAULT_USER_EMAIL)
        self.assertEqual(user.role, "admin")
        self.assertIsNone(user.password_hash)

    def test_creates_profiles_and_skills(self) -> None:
        report = run_seed(self.db)
        names = [p.name for p in self.db.query(LinkedInProfile).all()]
        self.assertCountEqual(names, [p["name"] for p in LINKEDIN_PROFILES])
        self.assertEqual(report.profiles, [p["name"] for p in LINKEDIN_PROFILES])
        self.assertEqual(self.db.query(Skill).count(), len(SKILLS))
        self.assertEqual(report.skills_inserted, len(SKILLS))
        self.assertEqual(report.skills_total, len(SKILLS))


class TestSeedIdempotent(unittest.TestCase):
    """A second run changes nothing."""

    def setUp(self) -> None:
        self.Session = make_session_factory()

    def test_second_run_is_noop(self) -> None:
        with self.Session() as db:
            first = run_seed(db)
        with self.Session() as db:
            second = run_seed(db)
            self.assertEqual(second.default_user_action, DefaultUserAction.KEEP)
            self.assertEqual(second.default_user_id, first.default_user_id)
            self.assertEqual(second.skills_inserted, 0)
            self.assertEqual(db.query(LinkedInProfile).count(), len(LINKEDIN_PROFILES))
            self.assertEqual(db.query(Skill).count(), len(SKILLS))
            self.assertEqual(db.query(User).count(), 1)

    def test_existing_default_user_is_untouched(self) -> None:
        with self.Session() as db:
            run_seed(db)
            user = db.get(User, DEFAULT_USER_ID)
            user.name = "Renamed"
            user.password_hash = "existing-hash"
            db.commit()
        with self.Session() as db:
            run_seed(db)
            user = db.get(User, DEFAULT_USER_ID)
            self.assertEqual(user.name, "Renamed")
            self.assertEqual(user.password_hash, "existing-hash")


class TestSeedPartialState(unittest.TestCase):
    """Pre-existing rows are tolerated and not duplicated."""

    def setUp(self) -> None:
        self.Session = make_session_factory()
        self.db = self.Session()

    def tearDown(self) -> None:
        self.db.close()

    def test_email_collision_creates_alternate_row(self) -> None:
        other = add_user(self.db, email=DEFAULT_USER_EMAIL, name="Earlier Admin", role="admin")
        report = run_seed(self.db)
        self.assertEqual(
            report.default_user_action, DefaultUserAction.CREATE_WITH_ALTERNATE_EMAIL
        )
        pinned = self.db.get(User, DEFAULT_USER_ID)
        self.assertEqual(pinned.email, ALTERNATE_USER_EMAIL)
        untouched = self.db.get(User, other.id)
        self.assertEqual(untouched.email, DEFAULT_USER_EMAIL)
        self.assertEqual(untouched.name, "Earlier Admin")
        self.assertEqual(self.db.query(User).count(), 2)

    def test_mixed_case_email_collision_uses_alternate(self) -> None:
        legacy = add_user(self.db, email="Admin@ProspectManager.com", name="Legacy Admin")
        report = run_seed(self.db)
        self.assertEqual(
            report.default_user_action, DefaultUserAction.CREATE_WITH_ALTERNATE_EMAIL
        )
        self.assertEqual(self.db.get(User, DEFAULT_USER_ID).email, ALTERNATE_USER_EMAIL)
        same_email = (
            self.db.query(User)
            .filter(func.lower(User.email) == DEFAULT_USER_EMAIL)
            .all()
        )
        self.assertEqual([u.id for u in same_email], [legacy.id])

    def test_both_emails_taken_aborts_run(self) -> None:
        add_user(self.db, email=DEFAULT_USER_EMAIL, name="Earlier Admin")
        add_user(self.db, email=ALTERNATE_USER_EMAIL, name="Earlier Extension")
        with self.assertRaises(Conflict):
            run_seed(self.db)
        self.assertIsNone(self.db.get(User, DEFAULT_USER_ID))
        self.assertEqual(self.db.query(LinkedInProfile).count(), 0)

    def test_some_profiles_already_present(self) -> None:
        existing = add_profile(self.db, name=LINKEDIN_PROFILES[1]["name"], niche="SaaS")
        run_seed(self.db)
        self.assertEqual(self.db.query(LinkedInProfile).count(), len(LINKEDIN_PROFILES))
        kept = self.db.get(LinkedInProfile, existing.id)
        self.assertEqual(kept.niche, "SaaS")

    def test_some_skills_already_present(self) -> None:
        self.db.add_all([Skill(name=SKILLS[0]), Skill(name=SKILLS[3])])
        self.db.commit()
        report = run_seed(self.db)
        self.assertEqual(report.skills_inserted, len(SKILLS) - 2)
        self.assertEqual(report.skills_total, len(SKILLS))
        dupes = (
            self.db.query(Skill.name)
            .group_by(Skill.name)
            .having(func.count(Skill.id) > 1)
            .all()
        )
        self.assertEqual(dupes, [])


class TestSeedFailure(unittest.TestCase):
    """Any failing step rolls back and propagates."""

    def test_error_rolls_back_and_raises(self) -> None:
        session = MagicMock()
        session.query.side_effect = RuntimeError("database unavailable")
        with self.assertRaises(RuntimeError):
            run_seed(session)
        session.rollback.assert_called_once()
        session.commit.assert_not_called()


class TestSeedCli(unittest.TestCase):
    """app.seed.run maps success and failure to exit codes."""

    def test_exit_zero_on_success(self) -> None:
        from app import seed as seed_cli

        Session = make_session_factory()
        with patch.object(seed_cli, "SessionLocal", Session):
            self.assertEqual(seed_cli.run(), 0)
        with Session() as db:
            self.assertIsNotNone(db.get(User, DEFAULT_USER_ID))

    def test_exit_nonzero_on_failure(self) -> None:
        from app import seed as seed_cli

        session = MagicMock()
        with (
            patch.object(seed_cli, "SessionLocal", return_value=session),
            patch.object(seed_cli, "run_seed", side_effect=RuntimeError("boom")),
        ):
            self.assertEqual(seed_cli.run(), 1)
        session.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
