"""Helpers for issuing and validating bearer tokens."""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from app.config import get_settings

ALGORITHM = "HS256"


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    return jwt.encode({**data, "exp": expire}, settings.secret_key, algorithm=ALGORITHM)


def create_owner_token(owner_id: int, expires_delta: timedelta | None = None) -> str:
    """Issue a token whose subject is ``owner_id``."""

    return create_access_token({"sub": str(owner_id)}, expires_delta)


def decode_access_token(token: str) -> dict:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def owner_id_from_token(token: str) -> int:
    """Return the owner id carried in the ``sub`` claim of ``token``."""

    payload = decode_access_token(token)
    subject = payload.get("sub")
    try:
        owner_id = int(subject)
    except (TypeError, ValueError) as exc:
        raise ValueError("Token subject is not a valid owner id") from exc
    if owner_id <= 0:
        raise ValueError("Token subject is not a valid owner id")
    return owner_id
