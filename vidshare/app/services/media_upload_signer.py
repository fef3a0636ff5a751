"""
Media host upload signing

Browsers upload media straight to the media host; the backend only hands
out short-lived signed upload parameters, produced by the ImageKit SDK.
"""

import time
from typing import Optional

from imagekitio import ImageKit
from pydantic import BaseModel

# Media host rejects signatures that expire more than an hour out
MAX_UPLOAD_TOKEN_TTL_SECONDS = 3600


class MediaNotConfigured(RuntimeError):
    pass


class UploadAuthParams(BaseModel):
    token: str
    expire: int
    signature: str
    public_key: str
    url_endpoint: str


class MediaUploadSigner:
    def __init__(
        self,
        public_key: str,
        private_key: str,
        url_endpoint: str,
        ttl_seconds: int = 1800,
    ):
        self.public_key = public_key
        self.private_key = private_key
        self.url_endpoint = url_endpoint
        self.ttl_seconds = min(ttl_seconds, MAX_UPLOAD_TOKEN_TTL_SECONDS)
        self._client: Optional[ImageKit] = None

    @classmethod
    def from_config(cls, config) -> "MediaUploadSigner":
        return cls(
            public_key=config.MEDIA_PUBLIC_KEY,
            private_key=config.MEDIA_PRIVATE_KEY,
            url_endpoint=config.MEDIA_URL_ENDPOINT,
            ttl_seconds=config.MEDIA_UPLOAD_TOKEN_TTL_SECONDS,
        )

    @property
    def configured(self) -> bool:
        return bool(self.public_key and self.private_key and self.url_endpoint)

    @property
    def client(self) -> ImageKit:
        # The SDK refuses to initialise without all three settings
        if self._client is None:
            self._client = ImageKit(
                private_key=self.private_key,
                public_key=self.public_key,
                url_endpoint=self.url_endpoint,
            )
        return self._client

    def sign(self, token: Optional[str] = None, now: Optional[float] = None) -> UploadAuthParams:
        """
        Signed upload parameters; the SDK generates the token when none is given.

        Raises:
            MediaNotConfigured: public key, private key or URL endpoint missing
        """
        if not self.configured:
            raise MediaNotConfigured("Media host keys are not configured")

        expire = int(now if now is not None else time.time()) + self.ttl_seconds
        params = self.client.get_authentication_parameters(token or "", expire)
        return UploadAuthParams(
            token=params["token"],
            expire=int(params["expire"]),
            signature=params["signature"],
            public_key=self.public_key,
            url_endpoint=self.url_endpoint,
        )
