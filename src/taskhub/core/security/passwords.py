"""Argon2id password hashing."""

import argon2

from src.taskhub.core.config import get_settings


def _create_password_hasher() -> argon2.PasswordHasher:
    settings = get_settings()
    return argon2.PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )


_password_hasher = _create_password_hasher()


def hash_password(password: str) -> str:
    return _password_hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Check password against an Argon2 hash. Malformed hashes never match."""
    try:
        return _password_hasher.verify(hashed, password)
    except (argon2.exceptions.VerifyMismatchError, argon2.exceptions.InvalidHashError):
        return False


# Stands in for the stored hash when the account does not exist
DUMMY_PASSWORD_HASH = hash_password("dummy-password-for-timing-safety")


def check_password(password: str, hashed: str | None) -> bool:
    """Verify against hashed, or against a dummy hash when there is no account.

    Both branches run a full Argon2 verification, so response time does not
    reveal whether an email is registered.
    """
    if hashed is None:
        verify_password(password, DUMMY_PASSWORD_HASH)
        return False
    return verify_password(password, hashed)
