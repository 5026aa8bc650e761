"""Tests for app.services.auth: extension lookup, dashboard login, password change."""

import unittest
from unittest.mock import patch

from app.core.errors import (
    BadCredentials,
    NoPasswordSet,
    NoSuchAccount,
    Unauthenticated,
    ValidationError,
)
from app.core.security import TokenIssuer, verify_password
from app.models import User
from app.services.auth import authenticate, change_password, lookup_by_email
from db_helpers import TEST_BCRYPT_ROUNDS, add_user, make_session_factory

SECRET = "test-secret-with-enough-entropy-0123456789"


class _AuthTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session_factory()()
        self.issuer = TokenIssuer(SECRET)
        # New hashes written by the service use the fast test cost.
        patcher = patch("app.core.security.settings.BCRYPT_ROUNDS", TEST_BCRYPT_ROUNDS)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self.db.close()


class TestLookupByEmail(_AuthTestCase):
    """Passwordless lookup normalizes the email and never issues a token."""

    def test_normalizes_email(self) -> None:
        user = add_user(self.db, email="alice@example.com")
        found = lookup_by_email(self.db, "  Alice@Example.COM ")
        self.assertEqual(found.id, user.id)

    def test_missing_email(self) -> None:
        with self.assertRaises(ValidationError):
            lookup_by_email(self.db, None)
        with self.assertRaises(ValidationError):
            lookup_by_email(self.db, "   ")

    def test_unknown_email(self) -> None:
        with self.assertRaises(NoSuchAccount):
            lookup_by_email(self.db, "nobody@example.com")

    def test_matches_mixed_case_stored_email(self) -> None:
        user = add_user(self.db, email="Legacy@Example.com")
        found = lookup_by_email(self.db, "legacy@example.com")
        self.assertEqual(found.id, user.id)


class TestAuthenticate(_AuthTestCase):
    """Dashboard login by email or username, with three distinct failure causes."""

    def setUp(self) -> None:
        super().setUp()
        self.user = add_user(
            self.db,
            email="admin@example.com",
            username="boss",
            role="admin",
            password="hunter22",
        )

    def test_login_by_username_case_insensitive(self) -> None:
        user, token = authenticate(self.db, "BOSS", "hunter22", self.issuer)
        self.assertEqual(user.id, self.user.id)
        claims = self.issuer.verify(token)
        self.assertEqual(claims.subject_id, self.user.id)
        self.assertEqual(claims.role, "admin")

    def test_login_by_email(self) -> None:
        user, _ = authenticate(self.db, " Admin@Example.com", "hunter22", self.issuer)
        self.assertEqual(user.id, self.user.id)

    def test_missing_fields(self) -> None:
        with self.assertRaises(ValidationError):
            authenticate(self.db, "", "hunter22", self.issuer)
        with self.assertRaises(ValidationError):
            authenticate(self.db, "boss", None, self.issuer)

    def test_no_such_account(self) -> None:
        with self.assertRaises(NoSuchAccount):
            authenticate(self.db, "ghost", "hunter22", self.issuer)

    def test_no_password_set(self) -> None:
        add_user(self.db, email="nopw@example.com", username="nopw")
        with self.assertRaises(NoPasswordSet):
            authenticate(self.db, "nopw", "anything", self.issuer)

    def test_wrong_password(self) -> None:
        with self.assertRaises(BadCredentials) as ctx:
            authenticate(self.db, "boss", "hunter23", self.issuer)
        self.assertIsInstance(ctx.exception, Unauthenticated)
        self.assertEqual(ctx.exception.status_code, 401)


class TestLoginStringCollision(_AuthTestCase):
    """A login string equal to one user's email and another user's username."""

    def setUp(self) -> None:
        super().setUp()
        self.victim = add_user(
            self.db, email="victim@example.com", password="victimpw1"
        )
        # Inserted directly; the service refuses usernames containing '@'.
        self.other = add_user(
            self.db,
            email="other@example.com",
            username="victim@example.com",
            password="otherpw1",
        )

    def test_email_match_wins(self) -> None:
        user, _ = authenticate(self.db, "victim@example.com", "victimpw1", self.issuer)
        self.assertEqual(user.id, self.victim.id)

    def test_other_users_password_rejected(self) -> None:
        with self.assertRaises(BadCredentials):
            authenticate(self.db, "victim@example.com", "otherpw1", self.issuer)


class TestChangePassword(_AuthTestCase):
    """Password change checks the current password and minimum length."""

    def setUp(self) -> None:
        super().setUp()
        self.user = add_user(self.db, email="bob@example.com", password="oldpass1")
        self.original_hash = self.user.password_hash

    def _stored_hash(self) -> str | None:
        self.db.expire_all()
        return self.db.get(User, self.user.id).password_hash

    def test_success(self) -> None:
        change_password(self.db, self.user.id, "oldpass1", "newpass1")
        self.assertTrue(verify_password("newpass1", self._stored_hash()))

    def test_wrong_current_password_keeps_hash(self) -> None:
        with self.assertRaises(BadCredentials):
            change_password(self.db, self.user.id, "not-it", "newpass1")
        self.assertEqual(self._stored_hash(), self.original_hash)

    def test_new_password_too_short(self) -> None:
        with self.assertRaises(ValidationError):
            change_password(self.db, self.user.id, "oldpass1", "12345")
        self.assertEqual(self._stored_hash(), self.original_hash)

    def test_missing_fields(self) -> None:
        with self.assertRaises(ValidationError):
            change_password(self.db, self.user.id, None, "newpass1")

    def test_no_password_previously_set(self) -> None:
        other = add_user(self.db, email="carol@example.com")
        with self.assertRaises(ValidationError):
            change_password(self.db, other.id, "whatever", "newpass1")


if __name__ == "__main__":
    unittest.main()
