"""Line and text formatting components.

This package applies the ordered pattern passes to single lines and to
multi-line text.
"""

from .line_formatter import LineFormatter
from .text_formatter import TextFormatter

__all__ = ["LineFormatter", "TextFormatter"]
