from typing import List, Optional

from app.schemas.blog import PostCard
from app.schemas.pages import (
    AboutView,
    ContactItem,
    Hero,
    HomeView,
    LatestPosts,
    Pillar,
    Program,
    ProgramsView,
    Section,
)
from app.services.posts_service import EMPTY_LIST_MESSAGE

ORGANIZATION_NAME = "Mathematics Outstanding Students Cambodia"

WHO_WE_ARE = [
    "MOSC (Mathematics Outstanding Students Cambodia) is Cambodia's premier platform "
    "dedicated to nurturing exceptional mathematical talent and fostering a culture of "
    "excellence in mathematics education. We are committed to identifying, developing, "
    "and celebrating Cambodia's most outstanding young mathematicians.",
    "Our organization provides world-class mathematics training, competitive "
    "opportunities, and mentorship programs designed to prepare Cambodian students for "
    "international mathematical competitions. We are also expanding our reach into "
    "comprehensive STEM education to equip students with 21st-century skills.",
    "Join us in our mission to elevate Cambodia's presence in the global mathematics "
    "community and inspire the next generation of mathematical innovators and leaders.",
]

PROGRAMS = [
    Program(
        icon="📚",
        title="Mathematics Courses",
        description="Comprehensive curriculum covering algebra, geometry, "
        "trigonometry, calculus, and competition mathematics",
    ),
    Program(
        icon="🧮",
        title="Math Competitions",
        description="Prestigious competitions including national and international "
        "mathematics olympiads",
    ),
    Program(
        icon="🔬",
        title="STEM Workshops",
        description="Hands-on workshops in Science, Technology, Engineering, and "
        "Mathematics integration",
    ),
    Program(
        icon="🏆",
        title="Olympiad Training",
        description="Specialized coaching for IMO, ASEAN, and regional mathematical "
        "olympiad preparation",
    ),
]

PILLARS = [
    Pillar(
        title="Mission",
        icon="🎯",
        content="To identify, nurture, and develop Cambodia's most outstanding "
        "mathematical talent through world-class education, rigorous training, and "
        "competitive opportunities that prepare students for excellence at regional "
        "and international levels.",
    ),
    Pillar(
        title="Vision",
        icon="🌟",
        content="To establish Cambodia as a recognized hub of mathematical excellence "
        "in Southeast Asia, producing world-class mathematicians who contribute "
        "significantly to global science, technology, and innovation.",
    ),
    Pillar(
        title="Values",
        icon="💎",
        content="Excellence • Integrity • Collaboration • Accessibility • Innovation "
        "• Cambodian Pride",
    ),
]

CONTACT = [
    ContactItem(icon="📧", title="Email", content="mosccambodia@gmail.com"),
    ContactItem(icon="📍", title="Location", content="Phnom Penh, Cambodia"),
]


def home_view(
    latest: Optional[List[PostCard]] = None, site_name: str = "MOSC"
) -> HomeView:
    latest = latest or []
    return HomeView(
        hero=Hero(
            title="Welcome to",
            highlight=site_name,
            subtitle=ORGANIZATION_NAME,
            tagline="Empowering Cambodia's brightest mathematical minds through "
            "education, competition, and STEM excellence",
            ctaLabel="Explore More",
            ctaLink="/programs",
        ),
        about=Section(heading="Who Are We?", paragraphs=WHO_WE_ARE),
        programs=PROGRAMS,
        pillars=PILLARS,
        latest=LatestPosts(
            heading="Popular Blogs",
            posts=latest,
            emptyMessage=None if latest else EMPTY_LIST_MESSAGE,
        ),
        contact=CONTACT,
        footer=f"© 2025 {site_name} - {ORGANIZATION_NAME}. All rights reserved.",
    )


def about_view() -> AboutView:
    return AboutView(
        about=Section(heading="Who Are We?", paragraphs=WHO_WE_ARE),
        pillarsHeading="Our Mission, Vision & Values",
        pillars=PILLARS,
    )


def programs_view() -> ProgramsView:
    return ProgramsView(heading="Our Programs", programs=PROGRAMS)
