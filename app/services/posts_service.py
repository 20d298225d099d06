import logging
import math
from typing import List, Optional

from app.repos.posts_repo import (
    ContentClientError,
    NotFoundError,
    resolve_image_url,
)
from app.schemas.blog import (
    BlogDetailView,
    BlogListView,
    BlogPost,
    Pagination,
    PostCard,
)
from app.services.content_parser import iter_leaf_text
from app.services.excerpt import (
    DEFAULT_EXCERPT_LENGTH,
    HOME_PREVIEW_FALLBACK,
    NO_DESCRIPTION_FALLBACK,
    RICH_CONTENT_FALLBACK,
    extract_excerpt,
)
from app.services.rich_text import render_content
from app.utils import calculate_reading_time, format_display_date

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 9
LIST_ERROR_MESSAGE = (
    "Unable to connect to the blog server. Make sure Strapi is running at {base_url}"
)
EMPTY_LIST_MESSAGE = "No blogs available yet."
DETAIL_NOT_FOUND_MESSAGE = "Blog not found"
DETAIL_ERROR_MESSAGE = "Failed to load blog. Please try again later."
BLOG_LIST_PATH = "/blog"


def total_pages(total_count: int, page_size: int) -> int:
    return max(1, math.ceil(total_count / page_size))


def build_card(
    post: BlogPost,
    base_url: str,
    *,
    excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
    fallback: str = RICH_CONTENT_FALLBACK,
    missing: str = NO_DESCRIPTION_FALLBACK,
) -> PostCard:
    return PostCard(
        documentId=post.documentId,
        title=post.title,
        category=post.category,
        author=post.author,
        date=format_display_date(post.date or post.createdAt),
        excerpt=extract_excerpt(
            post, excerpt_length, fallback=fallback, missing=missing
        ),
        image=resolve_image_url(post, base_url),
        link=f"{BLOG_LIST_PATH}/{post.documentId}",
    )


class _SequencedController:
    """
    Tracks which fetch is the latest one issued.

    A response is only applied if no newer fetch was started after it and the
    controller has not been closed in the meantime.
    """

    def __init__(self, client, base_url: Optional[str] = None):
        self.client = client
        self.base_url = (base_url or client.base_url).rstrip("/")
        self.loading = False
        self.error: Optional[str] = None
        self._seq = 0
        self._closed = False

    def close(self) -> None:
        self._closed = True

    def _begin(self) -> int:
        self._seq += 1
        self.loading = True
        self.error = None
        return self._seq

    def _is_stale(self, seq: int) -> bool:
        return self._closed or seq != self._seq


class BlogListController(_SequencedController):
    def __init__(
        self,
        client,
        page_size: int = DEFAULT_PAGE_SIZE,
        base_url: Optional[str] = None,
        excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
    ):
        super().__init__(client, base_url)
        self.page_size = page_size
        self.excerpt_length = excerpt_length
        self.posts: List[BlogPost] = []
        self.current_page = 1
        self.total_pages = 1

    async def load(self, page: int) -> bool:
        """Fetch ``page``. Returns False when the result was discarded or failed."""
        page = max(page, 1)
        seq = self._begin()
        self.current_page = page
        try:
            result = await self.client.list_posts(page, self.page_size)
        except ContentClientError as e:
            if self._is_stale(seq):
                return False
            logger.error(f"Error fetching blogs (page {page}): {e}")
            self.error = LIST_ERROR_MESSAGE.format(base_url=self.base_url)
            self.posts = []
            self.total_pages = 1
            self.loading = False
            return False

        if self._is_stale(seq):
            logger.debug(f"Discarding stale blog list response for page {page}")
            return False

        self.posts = result.items
        self.total_pages = total_pages(result.totalCount, self.page_size)
        self.loading = False
        return True

    async def go_to(self, page: int) -> bool:
        return await self.load(min(max(page, 1), self.total_pages))

    async def next_page(self) -> bool:
        return await self.go_to(self.current_page + 1)

    async def previous_page(self) -> bool:
        return await self.go_to(self.current_page - 1)

    def view(self) -> BlogListView:
        cards = [
            build_card(post, self.base_url, excerpt_length=self.excerpt_length)
            for post in self.posts
        ]
        failed = self.error is not None
        pagination = Pagination(
            currentPage=self.current_page,
            totalPages=self.total_pages,
            pages=[] if failed else list(range(1, self.total_pages + 1)),
            hasPrevious=not failed and self.current_page > 1,
            hasNext=not failed and self.current_page < self.total_pages,
            label=f"Page {self.current_page} of {self.total_pages}",
        )
        return BlogListView(
            posts=cards,
            pagination=pagination,
            loading=self.loading,
            error=self.error,
            emptyMessage=(
                EMPTY_LIST_MESSAGE
                if not cards and not failed and not self.loading
                else None
            ),
        )


class BlogDetailController(_SequencedController):
    def __init__(self, client, base_url: Optional[str] = None):
        super().__init__(client, base_url)
        self.post: Optional[BlogPost] = None
        self.not_found = False

    async def load(self, document_id: str) -> bool:
        seq = self._begin()
        self.not_found = False
        try:
            post = await self.client.get_post(document_id)
        except NotFoundError:
            if self._is_stale(seq):
                return False
            logger.info(f"Blog {document_id} not found")
            self._fail(DETAIL_NOT_FOUND_MESSAGE)
            self.not_found = True
            return False
        except ContentClientError as e:
            if self._is_stale(seq):
                return False
            logger.error(f"Error fetching blog {document_id}: {e}")
            self._fail(DETAIL_ERROR_MESSAGE)
            return False

        if self._is_stale(seq):
            logger.debug(f"Discarding stale blog response for {document_id}")
            return False

        self.post = post
        self.loading = False
        return True

    def _fail(self, message: str) -> None:
        self.error = message
        self.post = None
        self.loading = False

    def view(self) -> BlogDetailView:
        post = self.post
        if self.error or post is None:
            error = self.error
            if error is None and not self.loading:
                error = DETAIL_NOT_FOUND_MESSAGE
            return BlogDetailView(
                loading=self.loading, error=error, backLink=BLOG_LIST_PATH
            )

        return BlogDetailView(
            documentId=post.documentId,
            title=post.title,
            category=post.category,
            author=post.author,
            date=format_display_date(post.date or post.createdAt, long=True),
            excerpt=post.excerpt or None,
            image=resolve_image_url(post, self.base_url),
            readingTime=calculate_reading_time(_plain_text(post.content)),
            body=render_content(post.content),
            loading=self.loading,
            backLink=BLOG_LIST_PATH,
        )


class LatestPostsController(_SequencedController):
    """Newest posts for the home page. Failures leave the preview empty."""

    def __init__(
        self,
        client,
        limit: int = 3,
        base_url: Optional[str] = None,
        excerpt_length: int = DEFAULT_EXCERPT_LENGTH,
    ):
        super().__init__(client, base_url)
        self.limit = limit
        self.excerpt_length = excerpt_length
        self.posts: List[BlogPost] = []

    async def load(self) -> bool:
        seq = self._begin()
        try:
            result = await self.client.list_posts(1, self.limit, with_offset=False)
        except ContentClientError as e:
            if self._is_stale(seq):
                return False
            logger.error(f"Error fetching latest blogs: {e}")
            self.posts = []
            self.loading = False
            return False

        if self._is_stale(seq):
            return False
        self.posts = result.items[: self.limit]
        self.loading = False
        return True

    def cards(self) -> List[PostCard]:
        return [
            build_card(
                post,
                self.base_url,
                excerpt_length=self.excerpt_length,
                fallback=HOME_PREVIEW_FALLBACK,
                missing=HOME_PREVIEW_FALLBACK,
            )
            for post in self.posts
        ]


def _plain_text(content) -> str:
    if isinstance(content, str):
        return content
    return " ".join(iter_leaf_text(content))
