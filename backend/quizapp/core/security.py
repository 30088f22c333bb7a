"""Password / admin-key hashing and JWT token utilities."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
import bcrypt

from quizapp.config import settings

# bcrypt silently ignores everything past 72 bytes
_BCRYPT_MAX_BYTES = 72

# ── Secret hashing ────────────────────────────────────────────────────────────


def hash_password(plain: str) -> str:
    """Return the bcrypt hash of *plain*.

    Used for both account passwords and admin keys.

    Raises:
        ValueError: If the secret is longer than 72 bytes
    """
    raw = plain.encode("utf-8")
    if len(raw) > _BCRYPT_MAX_BYTES:
        raise ValueError(
            f"Secret is {len(raw)} bytes, but bcrypt has a "
            f"{_BCRYPT_MAX_BYTES}-byte limit. Please use a shorter one."
        )
    return bcrypt.hashpw(raw, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str | None) -> bool:
    """Check *plain* against a bcrypt *hashed* value; False on any mismatch."""
    if not plain or not hashed:
        return False
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # malformed hash or over-long secret
        return False


# ── JWT tokens ────────────────────────────────────────────────────────────────


def create_access_token(
    data: dict,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed JWT access token."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> dict | None:
    """Decode and validate a JWT. Returns payload dict or None on failure."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
