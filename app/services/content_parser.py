import enum
from typing import Any, Iterator


class ContentShape(enum.Enum):
    EMPTY = "empty"
    TEXT = "text"
    BLOCKS = "blocks"
    NESTED = "nested"
    UNKNOWN = "unknown"


def classify_content(content: Any) -> ContentShape:
    """Inspect the structure of a post's content once, in a fixed priority order.

    The CMS does not tag which of its shapes it sent, so this is the single
    place that decides: a string, a list of blocks, a block object carrying
    its own ``children`` list, nothing at all, or something else entirely.
    """
    if content is None:
        return ContentShape.EMPTY
    if isinstance(content, str):
        return ContentShape.TEXT
    if isinstance(content, list):
        return ContentShape.BLOCKS
    if isinstance(content, dict) and isinstance(content.get("children"), list):
        return ContentShape.NESTED
    return ContentShape.UNKNOWN


def iter_leaf_text(node: Any) -> Iterator[str]:
    """Yield the text of every leaf span under ``node``, depth-first.

    Walks with an explicit stack so arbitrarily deep CMS trees cannot exhaust
    the interpreter's recursion limit.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, str):
            yield current
            continue
        if isinstance(current, list):
            stack.extend(reversed(current))
            continue
        if not isinstance(current, dict):
            continue

        children = current.get("children")
        if isinstance(children, list):
            stack.extend(reversed(children))
            continue

        text = current.get("text")
        if isinstance(text, str):
            yield text


def leaf_text(node: Any) -> str:
    return "".join(iter_leaf_text(node))
