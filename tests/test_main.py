import httpx
from fastapi.testclient import TestClient

from app import dependencies as deps
from app.main import app
from tests.conftest import FakeContentClient, make_post


def test_lifespan_opens_and_closes_shared_http_client():
    with TestClient(app) as client:
        shared = app.state.cms_http
        assert isinstance(shared, httpx.AsyncClient)
        assert shared.is_closed is False

        res = client.get("/programs")
        assert res.status_code == 200

    assert shared.is_closed is True
    assert app.state.cms_http is None


def test_blog_routes_are_mounted():
    fake = FakeContentClient(posts=[make_post("doc-1")])

    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[deps.get_content_client] = lambda: fake
    try:
        with TestClient(app) as client:
            res = client.get("/blog")
            assert res.status_code == 200
            assert res.json()["posts"][0]["documentId"] == "doc-1"

            res = client.get("/blog/doc-1")
            assert res.status_code == 200
            assert res.json()["documentId"] == "doc-1"

            res = client.get("/")
            assert res.status_code == 200
    finally:
        app.dependency_overrides = original_overrides


def test_content_client_dependency_uses_shared_pool(monkeypatch):
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json={"data": [], "meta": {"pagination": {"total": 0}}})

    monkeypatch.setattr(
        deps, "settings", deps.Settings(CMS_URL="http://cms.internal:1337/")
    )

    real_client = httpx.AsyncClient
    monkeypatch.setattr(
        httpx,
        "AsyncClient",
        lambda: real_client(transport=httpx.MockTransport(handler)),
    )

    with TestClient(app) as client:
        res = client.get("/blog")

    assert res.status_code == 200
    assert res.json()["emptyMessage"] == "No blogs available yet."
    assert seen and seen[0].startswith("http://cms.internal:1337/api/posts?")
