from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator


class ImageRef(BaseModel):
    url: Optional[str] = None
    alternativeText: Optional[str] = None


class BlogPost(BaseModel):
    """A blog record as returned by the CMS. Read-only on our side."""

    id: Optional[int] = None
    documentId: str
    title: str = ""
    author: str = ""
    category: str = ""
    excerpt: Optional[str] = None
    # Shape is not guaranteed by the CMS: string, list of blocks or a block object
    content: Any = None
    date: Optional[str] = None
    featuredImage: Optional[ImageRef] = Field(
        default=None,
        validation_alias=AliasChoices("featuredImage", "featured_image"),
    )
    createdAt: Optional[str] = None

    @field_validator("title", "author", "category", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("featuredImage", mode="before")
    @classmethod
    def _unwrap_image(cls, value):
        if not isinstance(value, dict):
            return None
        # Strapi v4 wraps media as {"data": {"attributes": {...}}}
        data = value.get("data")
        if isinstance(data, dict):
            return data.get("attributes", data)
        return value


class PostPage(BaseModel):
    items: List[BlogPost] = Field(default_factory=list)
    totalCount: int = 0


class RenderNode(BaseModel):
    key: int
    tag: str
    text: Optional[str] = None
    children: List["RenderNode"] = Field(default_factory=list)


class PostCard(BaseModel):
    documentId: str
    title: str
    category: str
    author: str
    date: Optional[str] = None
    excerpt: str
    image: Optional[str] = None
    link: str


class Pagination(BaseModel):
    currentPage: int
    totalPages: int
    pages: List[int]
    hasPrevious: bool
    hasNext: bool
    label: str


class BlogListView(BaseModel):
    posts: List[PostCard] = Field(default_factory=list)
    pagination: Pagination
    loading: bool = False
    error: Optional[str] = None
    emptyMessage: Optional[str] = None


class BlogDetailView(BaseModel):
    documentId: Optional[str] = None
    title: Optional[str] = None
    category: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None
    excerpt: Optional[str] = None
    image: Optional[str] = None
    readingTime: Optional[str] = None
    body: List[RenderNode] = Field(default_factory=list)
    loading: bool = False
    error: Optional[str] = None
    backLink: str = "/blog"
