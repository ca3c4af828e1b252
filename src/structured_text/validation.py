"""Pre-render tree validation.

Checks the node tree against the data-model contract before any rendering
work starts, so a render either returns complete output or fails up front:

- the root is a Document
- no Document appears below the root
- nesting stays within ``RenderConfig.max_depth``, and within what the
  interpreter recursion limit lets the recursive renderers reach

The walk is iterative, so validating a pathologically deep tree cannot itself
overflow the stack.

Thread Safety:
    Pure function. Safe to call from any thread.

"""

import sys

from structured_text.config import get_render_config
from structured_text.errors import MalformedTreeError, RenderDepthError
from structured_text.nodes import Document, children_of, node_type_name

# Python frames one level of nesting costs while rendering:
# registry.render -> renderer.render -> registry.render_children.
FRAMES_PER_LEVEL = 3

# Frames left for the caller and for leaf rendering.
STACK_RESERVE = 200


def stack_depth_limit() -> int:
    """Deepest nesting the renderers can reach under the current recursion limit."""
    return max(1, (sys.getrecursionlimit() - STACK_RESERVE) // FRAMES_PER_LEVEL)


def validate(document: object, *, max_depth: int | None = None) -> int:
    """Validate a tree before rendering.

    Args:
        document: Root of the tree; must be a Document.
        max_depth: Depth limit. Defaults to the active RenderConfig's. Either
            way it is capped at ``stack_depth_limit()``.

    Returns:
        Depth of the deepest node (the root's children are at depth 1).

    Raises:
        MalformedTreeError: Root is not a Document, or a Document is nested.
        RenderDepthError: Nesting exceeds ``max_depth``.

    """
    if not isinstance(document, Document):
        msg = f"expected a document root, got {node_type_name(document)!r}"
        raise MalformedTreeError(msg)

    configured = max_depth if max_depth is not None else get_render_config().max_depth
    limit = min(configured, stack_depth_limit())
    deepest = 0

    # Depth-first, children pushed in reverse so errors surface in document order.
    stack: list[tuple[object, tuple[int, ...]]] = [
        (child, (i,)) for i, child in reversed(list(enumerate(document.children)))
    ]
    while stack:
        node, path = stack.pop()
        depth = len(path)
        if depth > limit:
            raise RenderDepthError(depth, limit, path)
        if isinstance(node, Document):
            raise MalformedTreeError("document node nested inside another node", path)
        deepest = max(deepest, depth)
        children = children_of(node)
        for i in range(len(children) - 1, -1, -1):
            stack.append((children[i], (*path, i)))

    return deepest
