"""Core exception hierarchy for webforge.

All webforge-specific exceptions inherit from WebforgeError so the CLI can
map any of them to a clean non-zero exit. Per-target failures (stage errors,
post-build errors) are raised here too, but the build coordinator catches
them per target instead of letting them abort the run.
"""

from __future__ import annotations

from pathlib import Path

# ============================================================================
# Base Exception
# ============================================================================


class WebforgeError(Exception):
    """Base exception for all webforge errors.

    Catch this to handle all webforge errors.
    """

    pass


# ============================================================================
# Configuration & Validation Errors
# ============================================================================


class ConfigurationError(WebforgeError):
    """Raised when configuration is invalid, missing, or resolves to nothing.

    Examples
    --------
    Example usage::

        raise ConfigurationError("builds", "no build targets resolved")
    """

    def __init__(self, component: str, reason: str) -> None:
        """Initialize configuration error.

        Args
        ----
            component: Name of the configuration section or file at fault
            reason: Explanation of what's wrong
        """
        super().__init__(f"Configuration error in '{component}': {reason}")
        self.component = component
        self.reason = reason


class ValidationError(WebforgeError):
    """Raised when a single value fails validation.

    Examples
    --------
    Example usage::

        raise ValidationError("fragments", "must be relative to the project root", "/abs.html")
    """

    def __init__(self, field: str, constraint: str, value: object = None) -> None:
        """Initialize validation error.

        Args
        ----
            field: Name of the field that failed validation
            constraint: Description of the validation constraint
            value: The invalid value (optional)
        """
        if value is not None:
            msg = f"Validation failed for '{field}': {constraint} (got {value!r})"
        else:
            msg = f"Validation failed for '{field}': {constraint}"
        super().__init__(msg)
        self.field = field
        self.constraint = constraint
        self.value = value


class ConfigLoadError(WebforgeError):
    """Raised when a sibling configuration file cannot be loaded.

    Used for the service-worker configuration, which is read by path after a
    target's pipeline has finished.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"Could not load config '{path}': {reason}")
        self.path = Path(path)
        self.reason = reason


# ============================================================================
# Build Errors
# ============================================================================


class StageError(WebforgeError):
    """Raised when a transform stage fails on an asset."""

    def __init__(self, stage: str, path: str, reason: str) -> None:
        super().__init__(f"Stage '{stage}' failed on '{path}': {reason}")
        self.stage = stage
        self.path = path
        self.reason = reason


class OutputClearError(WebforgeError):
    """Raised when the aggregate build directory cannot be removed.

    This aborts the whole run before any target starts.
    """

    def __init__(self, path: str | Path, original_error: Exception) -> None:
        super().__init__(f"Failed to clear output directory '{path}': {original_error}")
        self.path = Path(path)
        self.original_error = original_error
