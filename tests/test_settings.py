from pathlib import Path

from app.settings import Settings, choose_env_file


def test_defaults_point_at_local_cms():
    s = Settings(_env_file=None)
    assert s.CMS_URL == "http://localhost:1337"
    assert s.BLOG_PAGE_SIZE == 9
    assert s.HOME_LATEST_POSTS == 3
    assert s.EXCERPT_LENGTH == 150


def test_cms_url_read_from_environment(monkeypatch):
    monkeypatch.setenv("CMS_URL", "https://cms.mosc.org.kh/")
    monkeypatch.setenv("BLOG_PAGE_SIZE", "12")

    s = Settings(_env_file=None)

    assert s.cms_base_url == "https://cms.mosc.org.kh"
    assert s.BLOG_PAGE_SIZE == 12


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
