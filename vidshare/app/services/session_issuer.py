"""
Session token issuer

Signs and resolves self-contained session claims (JWT, HS256). Claims are
not persisted; a token stays valid until its absolute expiry.
"""

from datetime import UTC, datetime
from typing import Optional, Tuple

from jose import JWTError, jwt
from pydantic import BaseModel, ValidationError

from vidshare.app.services.auth_settings import AuthSettings
from vidshare.domain.entities import Account


class MissingSigningSecret(RuntimeError):
    pass


class SessionClaim(BaseModel):
    """Identity facts carried by a session token"""

    account_id: str
    email: str
    display_name: str = ""
    profile_image: Optional[str] = None
    issued_at: datetime
    expires_at: datetime


class SessionIssuer:
    ALGORITHM = "HS256"

    def __init__(self, settings: AuthSettings):
        if not settings.signing_secret:
            raise MissingSigningSecret("SESSION_SECRET is not configured")
        self._secret = settings.signing_secret
        self._ttl = settings.session_ttl

    def issue(self, account: Account) -> Tuple[str, SessionClaim]:
        """
        Sign a new claim for an account.

        Args:
            account: Authenticated account

        Returns:
            (JWT string, the claim it carries); expiry is issued_at + TTL
        """
        # JWT timestamps have second precision
        now = datetime.now(UTC).replace(microsecond=0)
        claim = SessionClaim(
            account_id=str(account.id),
            email=account.email,
            display_name=account.display_name or "",
            profile_image=account.profile_image,
            issued_at=now,
            expires_at=now + self._ttl,
        )
        payload = {
            "sub": claim.account_id,
            "email": claim.email,
            "name": claim.display_name,
            "picture": claim.profile_image,
            "iat": claim.issued_at,
            "exp": claim.expires_at,
        }
        return jwt.encode(payload, self._secret, algorithm=self.ALGORITHM), claim

    def resolve(self, token: str) -> Optional[SessionClaim]:
        """
        Verify signature and expiry and return the claim.

        Returns:
            SessionClaim, or None if the token is malformed, tampered or expired
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.ALGORITHM],
                options={"require_exp": True, "require_iat": True, "require_sub": True},
            )
        except JWTError:
            return None

        try:
            return SessionClaim(
                account_id=payload["sub"],
                email=payload["email"],
                display_name=payload.get("name") or "",
                profile_image=payload.get("picture"),
                issued_at=datetime.fromtimestamp(payload["iat"], UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], UTC),
            )
        except (KeyError, TypeError, ValueError, ValidationError):
            return None
