"""
Authorization gate

Two independent axes: session validity (any protected path) and admin
membership (an operator-configured email allow-list, not a per-account role).
"""

from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

from vidshare.app.services.auth_settings import AuthSettings
from vidshare.app.services.session_issuer import SessionClaim, SessionIssuer
from vidshare.domain.base import normalize_email


@dataclass(frozen=True)
class GateDecision:
    allowed: bool
    claim: Optional[SessionClaim] = None
    redirect_to: Optional[str] = None


class AuthorizationGate:
    def __init__(self, settings: AuthSettings, issuer: SessionIssuer):
        self.settings = settings
        self.issuer = issuer

    def is_protected(self, path: str) -> bool:
        if path in self.settings.public_paths:
            return False
        return not any(path.startswith(prefix) for prefix in self.settings.public_prefixes)

    def authorize(self, path: str, token: Optional[str]) -> GateDecision:
        """
        Allow iff the path is public or the token resolves to a valid claim.

        Denials carry the login location with the original path as callbackUrl.
        """
        if not self.is_protected(path):
            return GateDecision(allowed=True)

        claim = self.issuer.resolve(token) if token else None
        if claim is not None:
            return GateDecision(allowed=True, claim=claim)

        redirect_to = f"{self.settings.login_path}?callbackUrl={quote(path, safe='')}"
        return GateDecision(allowed=False, redirect_to=redirect_to)

    def is_admin(self, email: Optional[str]) -> bool:
        if not email:
            return False
        return normalize_email(email) in self.settings.admin_emails
