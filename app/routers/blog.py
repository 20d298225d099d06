import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
    HTTP_503_SERVICE_UNAVAILABLE,
)

from app import dependencies as deps
from app.schemas.blog import BlogDetailView, BlogListView
from app.services.posts_service import BlogDetailController, BlogListController

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/blog", response_model=BlogListView)
async def list_blogs(
    response: Response,
    page: int = Query(1, ge=1),
    controller: BlogListController = Depends(deps.get_blog_list_controller),
):
    """One page of the blog list, newest first."""
    try:
        await controller.load(page)
        if controller.error:
            response.status_code = HTTP_503_SERVICE_UNAVAILABLE
        return controller.view()
    except Exception as e:
        logger.error(f"Unexpected error listing blogs (page {page}): {e}")
        raise HTTPException(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve blogs",
        )
    finally:
        controller.close()


@router.get("/blog/{document_id}", response_model=BlogDetailView)
async def get_blog(
    document_id: str,
    response: Response,
    controller: BlogDetailController = Depends(deps.get_blog_detail_controller),
):
    """A single blog post with its body rendered to nodes."""
    try:
        await controller.load(document_id)
        if controller.not_found:
            response.status_code = HTTP_404_NOT_FOUND
        elif controller.error:
            response.status_code = HTTP_503_SERVICE_UNAVAILABLE
        return controller.view()
    except Exception as e:
        logger.error(f"Unexpected error retrieving blog {document_id}: {e}")
        raise HTTPException(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve blog",
        )
    finally:
        controller.close()
