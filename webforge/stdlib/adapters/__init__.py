"""Build toolkit adapters.

- ``CommandToolkit``: runs external tools configured per stage kind
- ``MockToolkit``: identity transforms that record every call
"""

from webforge.stdlib.adapters.command import CommandToolkit
from webforge.stdlib.adapters.mock import MockToolkit, RecordedTransform

__all__ = ["CommandToolkit", "MockToolkit", "RecordedTransform"]
