"""Natural language question service over country LPI records."""

from .ranking import region_averages, rows_above, top_n
from .scores import parse_score

__all__ = ["parse_score", "region_averages", "rows_above", "top_n"]
