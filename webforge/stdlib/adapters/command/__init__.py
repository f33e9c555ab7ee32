"""External-command build toolkit."""

from webforge.stdlib.adapters.command.command_toolkit import (
    PUSH_MANIFEST_FILENAME,
    CommandToolkit,
)

__all__ = ["PUSH_MANIFEST_FILENAME", "CommandToolkit"]
