from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.blog import PostCard


class Hero(BaseModel):
    title: str
    highlight: str
    subtitle: str
    tagline: str
    ctaLabel: str
    ctaLink: str


class Program(BaseModel):
    icon: str
    title: str
    description: str


class Pillar(BaseModel):
    title: str
    icon: str
    content: str


class ContactItem(BaseModel):
    icon: str
    title: str
    content: str


class Section(BaseModel):
    heading: str
    paragraphs: List[str] = Field(default_factory=list)


class LatestPosts(BaseModel):
    heading: str
    posts: List[PostCard] = Field(default_factory=list)
    emptyMessage: Optional[str] = None


class HomeView(BaseModel):
    hero: Hero
    about: Section
    programs: List[Program]
    pillars: List[Pillar]
    latest: LatestPosts
    contact: List[ContactItem]
    footer: str


class AboutView(BaseModel):
    about: Section
    pillarsHeading: str
    pillars: List[Pillar]


class ProgramsView(BaseModel):
    heading: str
    programs: List[Program]
