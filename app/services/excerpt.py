from typing import Any

from app.schemas.blog import BlogPost
from app.services.content_parser import ContentShape, classify_content, iter_leaf_text

DEFAULT_EXCERPT_LENGTH = 150

# The blog list and the home page preview word their fallbacks differently
RICH_CONTENT_FALLBACK = "Rich content article"
NO_DESCRIPTION_FALLBACK = "No description available"
HOME_PREVIEW_FALLBACK = "Read the full blog for more details"


def extract_excerpt(
    post: BlogPost,
    max_length: int = DEFAULT_EXCERPT_LENGTH,
    *,
    fallback: str = RICH_CONTENT_FALLBACK,
    missing: str = NO_DESCRIPTION_FALLBACK,
) -> str:
    """
    Build a short plain-text summary for a post card.

    An author-provided excerpt always wins and is never truncated. Otherwise
    the summary is cut from the content, whatever shape the CMS sent it in.
    ``fallback`` is used when the content yields no text, ``missing`` when
    there is no content or its shape is not recognised.
    """
    if post.excerpt:
        return post.excerpt

    shape = classify_content(post.content)
    if shape is ContentShape.TEXT:
        text = post.content[:max_length]
    elif shape is ContentShape.BLOCKS:
        text = _summarize(post.content, max_length)
    elif shape is ContentShape.NESTED:
        text = _summarize(post.content["children"], max_length)
    else:
        return missing

    return text or fallback


def _summarize(nodes: Any, max_length: int) -> str:
    text = ""
    for span in iter_leaf_text(nodes):
        if not span:
            continue
        text += span + " "
        if len(text) > max_length:
            break
    return text[:max_length].rstrip()
