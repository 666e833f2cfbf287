"""ContextVar-based printer configuration for tagtree.

A PrinterConfig is the immutable formatting policy of a render pass:
indentation, newline and whether every declaration is forced ``!important``.
Callers pass one explicitly, or rely on the ambient value held in a
ContextVar (PEP 567), which tests and CLIs can override for a block of code.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit
    html = render(node, config=PrinterConfig.PRETTY)

    # Ambient
    with printer_config_context(PrinterConfig.PRETTY):
        html = render(node)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import ClassVar

from tagtree.errors import ConfigError


@dataclass(frozen=True, slots=True)
class PrinterConfig:
    """Immutable formatting policy.

    Attributes:
        force_important: Append ``!important`` to every stylesheet declaration
        indentation: One level of indentation (empty in compact output)
        newline: Line separator (empty in compact output)

    """

    force_important: bool = False
    indentation: str = ""
    newline: str = ""

    DEFAULT: ClassVar["PrinterConfig"]
    PRETTY: ClassVar["PrinterConfig"]
    EMAIL: ClassVar["PrinterConfig"]

    @classmethod
    def from_dict(cls, config_dict: dict) -> "PrinterConfig":
        """Create PrinterConfig from dictionary.

        Only includes keys that are valid PrinterConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                PrinterConfig attribute names.

        Returns:
            New PrinterConfig instance with values from dict.

        Raises:
            ConfigError: If a known key carries a value of the wrong type.

        Example:
            >>> config = PrinterConfig.from_dict({"indentation": "  ", "newline": "\\n"})
            >>> config.indentation
            '  '

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}

        if "force_important" in filtered and not isinstance(filtered["force_important"], bool):
            raise ConfigError(
                f"force_important must be a bool, got {type(filtered['force_important']).__name__}"
            )
        for key in ("indentation", "newline"):
            if key in filtered and not isinstance(filtered[key], str):
                raise ConfigError(f"{key} must be a str, got {type(filtered[key]).__name__}")
        return cls(**filtered)

    @classmethod
    def named(cls, name: str) -> "PrinterConfig":
        """Look up a preset by name ("default", "pretty" or "email").

        Raises:
            ConfigError: If the name is not a known preset.

        """
        try:
            return _PRESETS[name.lower()]
        except KeyError:
            choices = ", ".join(sorted(_PRESETS))
            raise ConfigError(f"Unknown printer config {name!r} (expected one of: {choices})") from None


PrinterConfig.DEFAULT = PrinterConfig()
PrinterConfig.PRETTY = PrinterConfig(indentation="  ", newline="\n")
PrinterConfig.EMAIL = PrinterConfig(force_important=True, indentation=" ", newline="\n")

_PRESETS: dict[str, PrinterConfig] = {
    "default": PrinterConfig.DEFAULT,
    "pretty": PrinterConfig.PRETTY,
    "email": PrinterConfig.EMAIL,
}

# Thread-local configuration via ContextVar
_printer_config: ContextVar[PrinterConfig] = ContextVar(
    "printer_config",
    default=PrinterConfig.DEFAULT,
)


def get_printer_config() -> PrinterConfig:
    """Get current printer configuration (thread-local).

    Returns:
        The active PrinterConfig for this thread/context.

    """
    return _printer_config.get()


def set_printer_config(config: PrinterConfig) -> None:
    """Set printer configuration for current context.

    Args:
        config: PrinterConfig instance to use for this context.

    """
    _printer_config.set(config)


def reset_printer_config() -> None:
    """Reset to the compact default configuration."""
    _printer_config.set(PrinterConfig.DEFAULT)


@contextmanager
def printer_config_context(config: PrinterConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: PrinterConfig to use within the context.

    Yields:
        None

    Example:
        >>> with printer_config_context(PrinterConfig.PRETTY):
        ...     html = render(node)
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _printer_config.get()
    _printer_config.set(config)
    try:
        yield
    finally:
        _printer_config.set(previous)


__all__ = [
    "PrinterConfig",
    "get_printer_config",
    "printer_config_context",
    "reset_printer_config",
    "set_printer_config",
]
