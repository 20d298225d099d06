import asyncio

from app.repos.posts_repo import NotFoundError
from app.schemas.blog import BlogPost, PostPage


def make_post(document_id: str = "abc123", **fields) -> BlogPost:
    data = {
        "id": 1,
        "documentId": document_id,
        "title": "Hello MOSC",
        "author": "Sokha",
        "category": "Olympiad",
        "createdAt": "2025-01-05T10:00:00.000Z",
    }
    data.update(fields)
    return BlogPost.model_validate(data)


class FakeContentClient:
    """
    In-memory CMS client stand-in.
    Records the arguments of every call in ``calls``.
    """

    def __init__(
        self,
        posts=None,
        total=None,
        error: Exception | None = None,
        base_url: str = "http://cms.test",
    ):
        self.posts = list(posts or [])
        self.total = len(self.posts) if total is None else total
        self.error = error
        self.base_url = base_url
        self.calls = []

    async def list_posts(self, page, page_size, *, with_offset=True):
        self.calls.append(("list", page, page_size, with_offset))
        if self.error:
            raise self.error
        start = (page - 1) * page_size
        return PostPage(
            items=self.posts[start : start + page_size], totalCount=self.total
        )

    async def get_post(self, document_id):
        self.calls.append(("get", document_id))
        if self.error:
            raise self.error
        for post in self.posts:
            if post.documentId == document_id:
                return post
        raise NotFoundError(document_id)

    async def aclose(self):
        self.calls.append(("close",))


class GatedContentClient(FakeContentClient):
    """
    Client whose list responses are held until the test releases them,
    so out-of-order completion can be simulated.
    """

    def __init__(self, pages: dict[int, list], total: int, **kwargs):
        super().__init__(total=total, **kwargs)
        self.pages = pages
        self.gates: dict[int, asyncio.Event] = {}

    def gate(self, page: int) -> asyncio.Event:
        return self.gates.setdefault(page, asyncio.Event())

    async def list_posts(self, page, page_size, *, with_offset=True):
        self.calls.append(("list", page, page_size, with_offset))
        await self.gate(page).wait()
        return PostPage(items=self.pages[page], totalCount=self.total)
