"""Mock toolkit for testing."""

from webforge.stdlib.adapters.mock.mock_toolkit import MockToolkit, RecordedTransform

__all__ = ["MockToolkit", "RecordedTransform"]
