import re
from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig
from src.domain.entities import User, UserRole

ALGORITHM = "HS256"

_DURATION = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_UNITS = {"s": "seconds", "m": "minutes", "h": "hours", "d": "days", "": "seconds"}


def parse_duration(value: str) -> timedelta:
    """
    Parse an expiry such as "15m", "24h" or "7d".

    A bare number is read as seconds.
    """
    match = _DURATION.match(str(value))
    if match is None:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return timedelta(**{_UNITS[unit]: int(amount)})


def _claims(user: User) -> dict:
    return {"userId": str(user.id), "email": user.email, "role": UserRole(user.role).value}


def _sign(claims: dict, secret: str, expires_in: str) -> str:
    now = datetime.now(UTC)
    payload = {
        **claims,
        "exp": now + parse_duration(expires_in),
        "iat": now,
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def issue_access_token(user: User) -> str:
    """
    Generate JWT access token

    Args:
        user: Authenticated user

    Returns:
        JWT token string (HS256) carrying userId, email and role
    """
    return _sign(_claims(user), ApplicationConfig.JWT_SECRET, ApplicationConfig.JWT_EXPIRES_IN)


def issue_refresh_token(user: User) -> str:
    """Same claims as the access token, longer expiry, its own secret."""
    return _sign(
        _claims(user),
        ApplicationConfig.JWT_REFRESH_SECRET,
        ApplicationConfig.JWT_REFRESH_EXPIRES_IN,
    )


def issue_token_pair(user: User) -> dict:
    return {
        "accessToken": issue_access_token(user),
        "refreshToken": issue_refresh_token(user),
    }


def verify_token(token: str, secret: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string
        secret: Key the token must be signed with

    Returns:
        Decoded payload dict, or None if malformed, expired or mis-signed
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except JWTError:
        return None
    if "userId" not in payload:
        return None
    return payload


def verify_access_token(token: str) -> Optional[dict]:
    return verify_token(token, ApplicationConfig.JWT_SECRET)


def verify_refresh_token(token: str) -> Optional[dict]:
    return verify_token(token, ApplicationConfig.JWT_REFRESH_SECRET)


def extract_bearer(header: Optional[str]) -> Optional[str]:
    """Token from an ``Authorization: Bearer <token>`` header, else None."""
    if not header:
        return None
    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer" or not parts[1]:
        return None
    return parts[1]
