"""Exception classes for structured-text.

Provides standardized exceptions for error handling throughout the package.
"""

from __future__ import annotations


class StructuredTextError(Exception):
    """Base exception for all structured-text errors.

    Subclass this for specific error categories.
    """

    pass


class MalformedTreeError(StructuredTextError):
    """Node tree violates the data-model contract.

    Raised before rendering begins, e.g. when a Document appears below the
    root or the renderer is handed something other than a Document.
    """

    def __init__(self, message: str, path: tuple[int, ...] = ()) -> None:
        """Initialize with optional location in the tree.

        Args:
            message: Error description
            path: Child indices from the root to the offending node
        """
        self.message = message
        self.path = path

        location = ""
        if path:
            location = "at /" + "/".join(str(i) for i in path) + " "

        super().__init__(f"{location}{message}")


class RenderDepthError(MalformedTreeError):
    """Tree nests deeper than the configured limit.

    The limit keeps traversal from exhausting the interpreter stack.
    """

    def __init__(
        self,
        depth: int,
        limit: int,
        path: tuple[int, ...] = (),
        message: str | None = None,
    ) -> None:
        """Initialize depth error.

        Args:
            depth: Depth reached
            limit: Effective depth limit
            path: Child indices from the root to the node that crossed the limit
            message: Overrides the default "exceeds limit" description
        """
        self.depth = depth
        self.limit = limit
        if message is None:
            message = f"nesting depth {depth} exceeds limit of {limit}"
        super().__init__(message, path)


class RenderError(StructuredTextError):
    """Error during fragment rendering.

    Raised when a registered renderer breaks the renderer contract,
    for example by returning something other than a list of fragments.
    """

    pass
