from typing import Dict, Optional

from fastapi import status

from vidshare.libs.result import Error


class ClientError(Exception):
    """4xx with the error code and message passed through to the caller"""

    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.base_error = base_error
        self.status_code = status_code
        self.headers = headers
        super().__init__(base_error.message)


class ServerError(Exception):
    """5xx; only the code reaches the caller, the message is logged"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
