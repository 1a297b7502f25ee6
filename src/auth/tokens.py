from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from src.config.settings import settings

ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24


def create_access_token(email: str, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(UTC) + (expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES))
    return jwt.encode({"sub": email, "exp": expire}, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> str | None:
    """Return the subject email of a valid token, ``None`` otherwise."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None
    email = payload.get("sub")
    return email if isinstance(email, str) and email else None
