# Utilities package for the airline code scraper
from .csvline import quote_field, format_csv_line, split_csv_line
from .constants import SUFFIXES, CODE_COLUMN, USER_AGENTS

__all__ = ["quote_field", "format_csv_line", "split_csv_line", "SUFFIXES", "CODE_COLUMN", "USER_AGENTS"]
