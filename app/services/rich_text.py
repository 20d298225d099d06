import logging
from typing import Any, Dict, List

from app.schemas.blog import RenderNode
from app.services.content_parser import ContentShape, classify_content, leaf_text

logger = logging.getLogger(__name__)

DEFAULT_HEADING_LEVEL = 2
HEADING_TAGS: Dict[int, str] = {
    1: "h1",
    2: "h2",
    3: "h3",
    4: "h4",
    5: "h5",
    6: "h6",
}


def render_content(content: Any) -> List[RenderNode]:
    """
    Turn CMS rich text into an ordered list of render nodes.

    Each node is keyed by its block's position. Unknown block types and
    unexpected shapes fall back to a plain paragraph so no text is dropped.
    """
    shape = classify_content(content)
    if shape is ContentShape.EMPTY:
        return []
    if shape is ContentShape.TEXT:
        return [RenderNode(key=0, tag="p", text=content)]
    if shape is ContentShape.NESTED:
        return [render_block(content, 0)]
    if shape is ContentShape.BLOCKS:
        return [render_block(block, index) for index, block in enumerate(content)]

    logger.warning(f"Cannot render content of type {type(content).__name__}")
    return []


def render_block(block: Any, key: int) -> RenderNode:
    block_type = block.get("type") if isinstance(block, dict) else None

    if block_type == "heading":
        return RenderNode(
            key=key, tag=heading_tag(block.get("level")), text=leaf_text(block)
        )

    if block_type == "paragraph":
        return RenderNode(
            key=key,
            tag="p",
            children=[
                RenderNode(key=idx, tag="span", text=leaf_text(child))
                for idx, child in enumerate(_children(block))
            ],
        )

    if block_type == "list":
        tag = "ol" if block.get("format") == "ordered" else "ul"
        return RenderNode(
            key=key,
            tag=tag,
            children=[
                RenderNode(key=idx, tag="li", text=leaf_text(item))
                for idx, item in enumerate(_children(block))
            ],
        )

    if block_type == "quote":
        return RenderNode(key=key, tag="blockquote", text=leaf_text(block))

    if block_type is not None:
        logger.debug(f"Rendering unknown block type {block_type!r} as paragraph")
    return RenderNode(key=key, tag="p", text=leaf_text(block))


def heading_tag(level: Any) -> str:
    try:
        level = int(level or DEFAULT_HEADING_LEVEL)
    except (TypeError, ValueError, OverflowError):
        level = DEFAULT_HEADING_LEVEL
    return HEADING_TAGS[min(max(level, 1), 6)]


def _children(block: dict) -> list:
    children = block.get("children")
    return children if isinstance(children, list) else []
