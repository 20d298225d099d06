import logging
import urllib.parse
from typing import Optional

import httpx
from pydantic import ValidationError

from app.schemas.blog import BlogPost, PostPage

logger = logging.getLogger(__name__)

POSTS_ENDPOINT = "/api/posts"


class ContentClientError(Exception):
    """Base class for failures talking to the CMS."""


class NetworkError(ContentClientError):
    """CMS unreachable, non-success status or unreadable response."""


class NotFoundError(ContentClientError):
    """No post matches the requested documentId."""


def page_offset(page: int, page_size: int) -> int:
    if page < 1 or page_size < 1:
        raise ValueError("page and page_size must be positive")
    return (page - 1) * page_size


class ContentClient:
    """Read-only client for the CMS posts collection."""

    def __init__(self, base_url: str, http: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self._owns_http = http is None
        self.http = http or httpx.AsyncClient()

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def list_posts(
        self, page: int, page_size: int, *, with_offset: bool = True
    ) -> PostPage:
        params = {
            "pagination[limit]": page_size,
            "sort": "createdAt:desc",
            "populate": "*",
        }
        start = page_offset(page, page_size)
        if with_offset:
            params["pagination[start]"] = start

        url = f"{self.base_url}{POSTS_ENDPOINT}"
        try:
            body = await self._get_json(url, params)
        except NotFoundError as e:
            # A missing collection means the CMS is misconfigured, not a missing post
            raise NetworkError(f"CMS has no posts collection at {url}") from e
        data = body.get("data") if isinstance(body, dict) else None
        if not isinstance(data, list):
            raise NetworkError("Unexpected list response from CMS: missing data")

        try:
            items = [BlogPost.model_validate(item) for item in data]
        except ValidationError as e:
            raise NetworkError(f"Unexpected post record from CMS: {e}") from e

        meta = body.get("meta") or {}
        if not isinstance(meta, dict):
            raise NetworkError("Unexpected list response from CMS: bad meta")
        pagination = meta.get("pagination") or {}
        if not isinstance(pagination, dict):
            raise NetworkError("Unexpected list response from CMS: bad pagination")
        try:
            total = max(int(pagination.get("total", len(items))), 0)
        except (TypeError, ValueError, OverflowError) as e:
            raise NetworkError(
                f"Unexpected pagination total from CMS: {pagination.get('total')!r}"
            ) from e
        logger.debug(
            f"Fetched {len(items)} posts (start={start}, limit={page_size}, total={total})"
        )
        return PostPage(items=items, totalCount=total)

    async def get_post(self, document_id: str) -> BlogPost:
        encoded_id = urllib.parse.quote(document_id, safe="")
        body = await self._get_json(
            f"{self.base_url}{POSTS_ENDPOINT}/{encoded_id}", {"populate": "*"}
        )
        if not isinstance(body, dict):
            raise NetworkError(f"Unexpected detail response from CMS for {document_id}")
        data = body.get("data")
        if data is None:
            raise NotFoundError(document_id)
        try:
            return BlogPost.model_validate(data)
        except ValidationError as e:
            raise NetworkError(f"Unexpected post record from CMS: {e}") from e

    async def _get_json(self, url: str, params: dict):
        try:
            response = await self.http.get(url, params=params)
        except httpx.RequestError as e:
            raise NetworkError(f"CMS request to {url} failed: {e}") from e

        if response.status_code == 404:
            raise NotFoundError(url)
        if response.is_error:
            raise NetworkError(f"CMS responded with {response.status_code} for {url}")

        try:
            return response.json()
        except ValueError as e:
            raise NetworkError(f"CMS returned invalid JSON for {url}") from e


def resolve_image_url(post: BlogPost, base_url: str) -> Optional[str]:
    image = post.featuredImage
    if not image or not image.url:
        return None
    if image.url.startswith(("http://", "https://", "//")):
        return image.url
    return f"{base_url.rstrip('/')}{image.url}"
