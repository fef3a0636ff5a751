"""vidshare - video sharing backend (accounts, sessions, videos, moderation)."""

__version__ = "0.1.0"
