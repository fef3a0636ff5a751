from abc import ABC, abstractmethod


class IPasswordResetNotifier(ABC):
    """Delivers password reset links out of band"""

    @abstractmethod
    async def send_reset_link(self, email: str, reset_url: str) -> None:
        """Send the reset link; may raise on delivery failure"""
        pass
