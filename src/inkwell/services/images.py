"""Checks for user-supplied cover image URLs."""

from __future__ import annotations

import logging
import re

import httpx

logger = logging.getLogger(__name__)

IMAGE_URL_PATTERN = re.compile(
    r"^https?://[^\s/$.?#][^\s]*\.(?:jpe?g|png|gif|webp|svg|avif)(?:\?[^\s]*)?$",
    re.IGNORECASE,
)


def looks_like_image_url(url: str) -> bool:
    """Return True if ``url`` is http(s) and ends in a known image extension."""
    return bool(IMAGE_URL_PATTERN.match(url))


class ImageProbe:
    """Confirms that an image URL actually serves an image.

    Sends a HEAD request, retrying with a streamed GET (body left unread)
    when the host does not answer HEAD with a 2xx. Any 2xx answer whose
    content type starts with ``image/`` is accepted; network failures count
    as "not loadable".
    """

    def __init__(self, client: httpx.Client | None = None, timeout: float = 5.0) -> None:
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def __call__(self, url: str) -> bool:
        try:
            response = self._client.head(url)
            if not response.is_success:
                with self._client.stream("GET", url) as streamed:
                    response = streamed
        except httpx.HTTPError as err:
            logger.warning("Image probe for %s failed: %s", url, err)
            return False
        content_type = response.headers.get("content-type", "")
        return response.is_success and content_type.startswith("image/")

    def close(self) -> None:
        self._client.close()
