"""Unit tests for SessionTokenService."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from attendance_auth.exceptions import InvalidTokenError, TokenExpiredError
from attendance_auth.schemas import TEACHER_ROLE
from attendance_auth.services import SessionTokenService

SECRET = "test-secret-key-for-session-tokens-0123456789"
OTHER_SECRET = "another-secret-key-for-session-tokens-987654"
T0 = datetime(2026, 3, 1, 8, 0, 0, tzinfo=timezone.utc)


class FixedClock:
    """Settable clock for deterministic expiry tests."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class TestSessionTokenServiceInit:
    """Tests for SessionTokenService initialization."""

    def test_init_with_empty_secret_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            SessionTokenService(secret_key="")

    def test_init_with_non_positive_lifetime_raises(self):
        with pytest.raises(ValueError, match="must be positive"):
            SessionTokenService(secret_key=SECRET, expire_hours=0)

    def test_default_lifetime_is_24_hours(self):
        service = SessionTokenService(secret_key=SECRET)

        assert service.expires_in_seconds == 24 * 3600


class TestIssueAndVerify:
    """Tests for token creation and verification."""

    def setup_method(self):
        self.clock = FixedClock(T0)
        self.service = SessionTokenService(secret_key=SECRET, clock=self.clock)

    def test_issued_token_verifies(self):
        token = self.service.issue(teacher_id=1, email="a@x.com")

        payload = self.service.verify(token)

        assert payload.teacher_id == 1
        assert payload.email == "a@x.com"
        assert payload.role == TEACHER_ROLE
        assert payload.issued_at == T0
        assert payload.expires_at == T0 + timedelta(hours=24)

    def test_claims_are_standard_jwt(self):
        token = self.service.issue(teacher_id=7, email="b@x.com")

        claims = jwt.decode(
            token,
            SECRET,
            algorithms=["HS256"],
            options={"verify_exp": False, "verify_iat": False},
        )

        assert claims["sub"] == "7"
        assert claims["email"] == "b@x.com"
        assert claims["role"] == "TEACHER"
        assert claims["exp"] - claims["iat"] == 24 * 3600

    def test_token_valid_just_before_expiry(self):
        token = self.service.issue(teacher_id=1, email="a@x.com")

        self.clock.now = T0 + timedelta(hours=24) - timedelta(seconds=1)

        assert self.service.verify(token).teacher_id == 1

    def test_token_expired_at_exact_expiry(self):
        token = self.service.issue(teacher_id=1, email="a@x.com")

        self.clock.now = T0 + timedelta(hours=24)

        with pytest.raises(TokenExpiredError):
            self.service.verify(token)

    def test_sub_second_issue_time_keeps_full_lifetime(self):
        issued = T0 + timedelta(milliseconds=600)
        self.clock.now = issued
        token = self.service.issue(teacher_id=1, email="a@x.com")

        self.clock.now = issued + timedelta(hours=24) - timedelta(milliseconds=300)
        payload = self.service.verify(token)

        assert payload.issued_at == issued
        assert payload.expires_at == issued + timedelta(hours=24)

        self.clock.now = issued + timedelta(hours=24)
        with pytest.raises(TokenExpiredError):
            self.service.verify(token)

    def test_token_expired_long_after(self):
        token = self.service.issue(teacher_id=1, email="a@x.com")

        self.clock.now = T0 + timedelta(days=30)

        with pytest.raises(TokenExpiredError):
            self.service.verify(token)

    def test_expired_is_not_invalid(self):
        assert not issubclass(TokenExpiredError, InvalidTokenError)

    def test_custom_lifetime(self):
        service = SessionTokenService(
            secret_key=SECRET,
            expire_hours=1,
            clock=self.clock,
        )
        token = service.issue(teacher_id=1, email="a@x.com")

        self.clock.now = T0 + timedelta(hours=1)

        with pytest.raises(TokenExpiredError):
            service.verify(token)


class TestRejectedTokens:
    """Tests for forged and malformed tokens."""

    def setup_method(self):
        self.clock = FixedClock(T0)
        self.service = SessionTokenService(secret_key=SECRET, clock=self.clock)

    def test_altered_signature_is_invalid(self):
        token = self.service.issue(teacher_id=1, email="a@x.com")
        header, body, signature = token.split(".")
        middle = len(signature) // 2
        replacement = "A" if signature[middle] != "A" else "B"
        tampered_sig = signature[:middle] + replacement + signature[middle + 1 :]

        with pytest.raises(InvalidTokenError):
            self.service.verify(f"{header}.{body}.{tampered_sig}")

    def test_altered_payload_is_invalid(self):
        token = self.service.issue(teacher_id=1, email="a@x.com")
        other = self.service.issue(teacher_id=2, email="a@x.com")
        header, _, signature = token.split(".")
        _, other_body, _ = other.split(".")

        with pytest.raises(InvalidTokenError):
            self.service.verify(f"{header}.{other_body}.{signature}")

    def test_wrong_secret_is_invalid(self):
        other = SessionTokenService(secret_key=OTHER_SECRET, clock=self.clock)
        token = other.issue(teacher_id=1, email="a@x.com")

        with pytest.raises(InvalidTokenError):
            self.service.verify(token)

    def test_forged_expired_token_is_invalid_not_expired(self):
        """The signature is checked before expiry is considered."""
        other = SessionTokenService(secret_key=OTHER_SECRET, clock=self.clock)
        token = other.issue(teacher_id=1, email="a@x.com")
        self.clock.now = T0 + timedelta(days=2)

        with pytest.raises(InvalidTokenError):
            self.service.verify(token)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_garbage_is_invalid(self, token):
        with pytest.raises(InvalidTokenError):
            self.service.verify(token)

    def test_missing_claim_is_invalid(self):
        token = jwt.encode(
            {"sub": "1", "email": "a@x.com", "iat": int(T0.timestamp())},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify(token)

    def test_non_numeric_subject_is_invalid(self):
        token = jwt.encode(
            {
                "sub": "not-a-number",
                "email": "a@x.com",
                "role": TEACHER_ROLE,
                "iat": int(T0.timestamp()),
                "exp": int((T0 + timedelta(hours=1)).timestamp()),
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="Malformed"):
            self.service.verify(token)

    def test_other_role_is_invalid(self):
        token = jwt.encode(
            {
                "sub": "1",
                "email": "a@x.com",
                "role": "STUDENT",
                "iat": int(T0.timestamp()),
                "exp": int((T0 + timedelta(hours=1)).timestamp()),
            },
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify(token)

    def test_none_algorithm_is_invalid(self):
        token = jwt.encode(
            {
                "sub": "1",
                "email": "a@x.com",
                "role": TEACHER_ROLE,
                "iat": int(T0.timestamp()),
                "exp": int((T0 + timedelta(hours=1)).timestamp()),
            },
            key=None,
            algorithm="none",
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify(token)
