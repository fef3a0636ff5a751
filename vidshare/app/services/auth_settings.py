"""
Authentication settings

Immutable, built once at start-up from ApplicationConfig and handed to the
session issuer, the authorization gate and the use cases that need them.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import FrozenSet, Optional, Tuple

from vidshare.domain.base import normalize_email

DEFAULT_PUBLIC_PATHS: Tuple[str, ...] = (
    "/login",
    "/register",
    "/forgot-password",
    "/reset-password",
    "/health",
    "/docs",
    "/redoc",
    "/openapi.json",
)

# Auth-internal routes (login, register, reset request/verify/complete)
DEFAULT_PUBLIC_PREFIXES: Tuple[str, ...] = ("/auth/",)


@dataclass(frozen=True)
class AuthSettings:
    signing_secret: Optional[str]
    session_ttl: timedelta = timedelta(days=30)
    admin_emails: FrozenSet[str] = field(default_factory=frozenset)
    public_paths: Tuple[str, ...] = DEFAULT_PUBLIC_PATHS
    public_prefixes: Tuple[str, ...] = DEFAULT_PUBLIC_PREFIXES
    login_path: str = "/login"
    cookie_name: str = "vidshare_session"
    cookie_secure: bool = False
    bcrypt_rounds: int = 10
    password_min_length: int = 6
    reset_token_ttl: timedelta = timedelta(minutes=10)
    frontend_url: str = "http://localhost:3000"

    @classmethod
    def from_config(cls, config) -> "AuthSettings":
        return cls(
            signing_secret=config.SESSION_SECRET,
            session_ttl=timedelta(days=config.SESSION_TTL_DAYS),
            admin_emails=frozenset(normalize_email(e) for e in config.ADMIN_EMAILS),
            cookie_name=config.SESSION_COOKIE_NAME,
            cookie_secure=config.SESSION_COOKIE_SECURE,
            bcrypt_rounds=config.BCRYPT_ROUNDS,
            password_min_length=config.PASSWORD_MIN_LENGTH,
            reset_token_ttl=timedelta(minutes=config.RESET_TOKEN_TTL_MINUTES),
            frontend_url=config.FRONTEND_URL,
        )

    def reset_url(self, token: str) -> str:
        return f"{self.frontend_url.rstrip('/')}/reset-password?token={token}"
