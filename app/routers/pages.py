import logging

from fastapi import APIRouter, Depends

from app import dependencies as deps
from app.schemas.pages import AboutView, HomeView, ProgramsView
from app.services import static_pages
from app.services.posts_service import LatestPostsController
from app.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=HomeView)
async def home(
    controller: LatestPostsController = Depends(deps.get_latest_posts_controller),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Home page with a preview of the newest posts."""
    try:
        await controller.load()
        latest = controller.cards()
    except Exception as e:
        # The preview is optional; the home page renders without it
        logger.error(f"Unexpected error loading latest blogs: {e}")
        latest = []
    finally:
        controller.close()
    return static_pages.home_view(latest, site_name=current_settings.SITE_NAME)


@router.get("/about", response_model=AboutView)
def about():
    return static_pages.about_view()


@router.get("/programs", response_model=ProgramsView)
def programs():
    return static_pages.programs_view()
