from fastapi import Depends, Request

from app.repos.posts_repo import ContentClient
from app.services.posts_service import (
    BlogDetailController,
    BlogListController,
    LatestPostsController,
)
from app.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


async def get_content_client(
    request: Request, current_settings: Settings = Depends(get_settings)
):
    # Reuse the app-wide connection pool when the lifespan created one
    http = getattr(request.app.state, "cms_http", None)
    client = ContentClient(current_settings.cms_base_url, http=http)
    try:
        yield client
    finally:
        await client.aclose()


def get_blog_list_controller(
    client=Depends(get_content_client),
    current_settings: Settings = Depends(get_settings),
):
    return BlogListController(
        client,
        page_size=current_settings.BLOG_PAGE_SIZE,
        base_url=current_settings.cms_base_url,
        excerpt_length=current_settings.EXCERPT_LENGTH,
    )


def get_blog_detail_controller(
    client=Depends(get_content_client),
    current_settings: Settings = Depends(get_settings),
):
    return BlogDetailController(client, base_url=current_settings.cms_base_url)


def get_latest_posts_controller(
    client=Depends(get_content_client),
    current_settings: Settings = Depends(get_settings),
):
    return LatestPostsController(
        client,
        limit=current_settings.HOME_LATEST_POSTS,
        base_url=current_settings.cms_base_url,
        excerpt_length=current_settings.EXCERPT_LENGTH,
    )
