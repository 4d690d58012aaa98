import asyncio
from typing import Any

import cloudinary.uploader


class MediaUploader:
    def __init__(self, cloud_name: str, api_key: str, api_secret: str) -> None:
        self._credentials = {
            "cloud_name": cloud_name,
            "api_key": api_key,
            "api_secret": api_secret,
        }

    async def upload(self, image: Any) -> dict:
        # The SDK call is blocking; keep it off the event loop.
        return await asyncio.to_thread(cloudinary.uploader.upload, image, **self._credentials)
