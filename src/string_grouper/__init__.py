"""String Grouper - groups unique lines that share a delimited field value."""

from string_grouper.config import GrouperConfig
from string_grouper.engine.grouping import GroupingResult, group_lines

__version__ = "1.0.0"

__all__ = ["GrouperConfig", "GroupingResult", "group_lines", "__version__"]
