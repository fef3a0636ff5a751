"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for the auth domain.
"""

from datetime import datetime

from pydantic import BaseModel

from vidshare.app.services.session_issuer import SessionClaim


# ============================================================================
# Commands
# ============================================================================


class RegisterCommand(BaseModel):
    """Validated registration intent"""

    email: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class RegisterResponse(BaseModel):
    """Response for registration use case"""

    message: str
    user_id: str


class SessionResponse(BaseModel):
    """Signed session token plus the claim it carries"""

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    claim: SessionClaim


class MessageResponse(BaseModel):
    """Plain confirmation message"""

    message: str
