"""
Ingestion module for reading scored token tables.
"""

from responsive_text.ingestion.csv_reader import MissingColumnError, iter_rows, parse_score

__all__ = ["MissingColumnError", "iter_rows", "parse_score"]
