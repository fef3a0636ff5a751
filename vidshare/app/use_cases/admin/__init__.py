"""Admin use cases for user and video moderation."""

from .list_users_use_case import AdminUserView, ListUsersResponse, ListUsersUseCase
from .delete_user_use_case import DeleteUserResponse, DeleteUserUseCase
from .get_stats_use_case import GetStatsUseCase, StatsResponse

__all__ = [
    "ListUsersUseCase",
    "ListUsersResponse",
    "AdminUserView",
    "DeleteUserUseCase",
    "DeleteUserResponse",
    "GetStatsUseCase",
    "StatsResponse",
]
