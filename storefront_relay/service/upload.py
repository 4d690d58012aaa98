import asyncio
from typing import Any

from storefront_relay.adapter.client.media import MediaUploader


class UploadFailed(Exception):
    """Raised when any image in a batch could not be uploaded."""


async def upload_batch(uploader: MediaUploader, images: list[Any]) -> list[dict]:
    """Upload every image concurrently and return the results in input order.

    Waits for every upload to settle. The batch is all-or-nothing: one failure
    fails the whole request, and uploads that did complete are not rolled back.
    """
    results = await asyncio.gather(
        *(uploader.upload(image) for image in images),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise UploadFailed(str(result) or type(result).__name__) from result
    return list(results)
