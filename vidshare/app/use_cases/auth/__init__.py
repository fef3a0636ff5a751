"""
Authentication Use Cases

Registration, sessions, password reset and account deletion.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .reissue_session_use_case import ReissueSessionUseCase
from .request_password_reset_use_case import (
    GENERIC_RESET_MESSAGE,
    RequestPasswordResetUseCase,
)
from .verify_reset_token_use_case import VerifyResetTokenUseCase
from .complete_password_reset_use_case import CompletePasswordResetUseCase
from .delete_account_use_case import DeleteAccountUseCase
from .dtos import (
    MessageResponse,
    RegisterCommand,
    RegisterResponse,
    SessionResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "ReissueSessionUseCase",
    "RequestPasswordResetUseCase",
    "VerifyResetTokenUseCase",
    "CompletePasswordResetUseCase",
    "DeleteAccountUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "RegisterResponse",
    "SessionResponse",
    "MessageResponse",
    "GENERIC_RESET_MESSAGE",
]
