"""Top-level package for Nittei.

This package normalizes loosely written Japanese schedule text: full dates,
year-omitted dates, time ranges and bare years are rewritten into a fixed long
form. The main entry points are `TextFormatter` and `ScheduleFormatterApp`.
"""

from .app import ScheduleFormatterApp
from .text import LineFormatter, TextFormatter

__all__ = ["LineFormatter", "ScheduleFormatterApp", "TextFormatter", "__version__"]

__version__ = "1.2.6"
