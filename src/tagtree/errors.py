"""Exception classes for tagtree.

The engine accepts any CSS or HTML strings without validation, so the only
errors raised are contract violations and configuration mistakes.
"""

from __future__ import annotations


class TagtreeError(Exception):
    """Base exception for all tagtree errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(TagtreeError):
    """Error during HTML rendering.

    Raised when the renderer is handed something that is not a renderable
    node, or a component that never defined its body.
    """

    def __init__(self, message: str, node: object | None = None) -> None:
        """Initialize render error.

        Args:
            message: Description of the contract violation
            node: The offending node (optional)
        """
        self.node = node
        if node is not None:
            message = f"{type(node).__name__}: {message}"
        super().__init__(message)


class ConfigError(TagtreeError):
    """Error in printer configuration.

    Raised when a preset name is unknown or a config value has the wrong type.
    """

    pass
