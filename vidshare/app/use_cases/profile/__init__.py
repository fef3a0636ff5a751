"""Profile Use Cases"""

from .update_profile_use_case import (
    ProfileResponse,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)

__all__ = [
    "UpdateProfileUseCase",
    "UpdateProfileCommand",
    "ProfileResponse",
]
