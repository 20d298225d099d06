import httpx
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app import dependencies as deps
from app.repos.posts_repo import ContentClient, NetworkError
from app.routers import pages
from app.settings import Settings
from tests.conftest import FakeContentClient, make_post


def make_app(fake_client: FakeContentClient):
    app = FastAPI()
    current = Settings(CMS_URL="http://cms.test", SITE_NAME="MOSC")
    app.dependency_overrides[deps.get_content_client] = lambda: fake_client
    app.dependency_overrides[deps.get_settings] = lambda: current
    app.include_router(pages.router)
    return app


def test_home_includes_latest_posts_preview():
    posts = [make_post(f"doc-{i}", content=None) for i in range(5)]
    fake = FakeContentClient(posts=posts)
    client = TestClient(make_app(fake))

    res = client.get("/")

    assert res.status_code == 200
    body = res.json()
    assert body["hero"]["highlight"] == "MOSC"
    assert body["latest"]["heading"] == "Popular Blogs"
    assert [p["documentId"] for p in body["latest"]["posts"]] == [
        "doc-0",
        "doc-1",
        "doc-2",
    ]
    assert body["latest"]["posts"][0]["excerpt"] == "Read the full blog for more details"
    assert body["latest"]["emptyMessage"] is None
    assert fake.calls == [("list", 1, 3, False)]


def test_home_still_renders_when_cms_is_down():
    client = TestClient(make_app(FakeContentClient(error=NetworkError("down"))))

    res = client.get("/")

    assert res.status_code == 200
    body = res.json()
    assert body["latest"]["posts"] == []
    assert body["latest"]["emptyMessage"] == "No blogs available yet."
    assert len(body["programs"]) == 4


def cms_client(body) -> ContentClient:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=body))
    return ContentClient("http://cms.test", http=httpx.AsyncClient(transport=transport))


def test_home_still_renders_when_cms_sends_bad_pagination():
    body = {"data": [], "meta": {"pagination": {"total": None}}}
    client = TestClient(make_app(cms_client(body)))

    res = client.get("/")

    assert res.status_code == 200
    assert res.json()["latest"]["posts"] == []


def test_home_still_renders_on_unexpected_error(caplog):
    class BoomClient(FakeContentClient):
        async def list_posts(self, page, page_size, *, with_offset=True):
            raise RuntimeError("boom")

    client = TestClient(make_app(BoomClient()))

    with caplog.at_level("ERROR"):
        res = client.get("/")

    assert res.status_code == 200
    assert res.json()["latest"]["emptyMessage"] == "No blogs available yet."
    assert any("Unexpected error loading latest blogs" in r.message for r in caplog.records)


def test_about_page():
    client = TestClient(make_app(FakeContentClient()))

    res = client.get("/about")

    assert res.status_code == 200
    body = res.json()
    assert body["about"]["heading"] == "Who Are We?"
    assert [p["title"] for p in body["pillars"]] == ["Mission", "Vision", "Values"]


def test_programs_page():
    client = TestClient(make_app(FakeContentClient()))

    res = client.get("/programs")

    assert res.status_code == 200
    titles = [p["title"] for p in res.json()["programs"]]
    assert titles == [
        "Mathematics Courses",
        "Math Competitions",
        "STEM Workshops",
        "Olympiad Training",
    ]
