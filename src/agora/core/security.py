"""Password hashing and session token helpers."""
from __future__ import annotations

from jose import JWTError, jwt
from passlib.context import CryptContext

from agora.core.settings import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.password_hash_rounds,
)


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of ``password``."""
    return pwd_context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    """Check ``password`` against a hash produced by :func:`hash_password`."""
    return pwd_context.verify(password, hashed_password)


def encode_session_token(session_id: str) -> str:
    """Sign an opaque session handle so clients cannot forge one."""
    return jwt.encode({"sid": session_id}, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_session_token(token: str) -> str | None:
    """Return the session handle carried by ``token`` or None if it is invalid."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
    session_id = payload.get("sid")
    if not isinstance(session_id, str):
        return None
    return session_id
