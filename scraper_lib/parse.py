"""HTML parsing helpers for the airline code scraper."""
from dataclasses import dataclass, field
from typing import List

from bs4 import BeautifulSoup

from utils.constants import TABLE_CLASS_MARKER


@dataclass
class SectionTable:
    """Cells pulled from the first marked table of one list page."""
    header: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)


def _has_marker(class_attr) -> bool:
    if not class_attr:
        return False
    # bs4 returns multi-valued class attributes as a list
    if isinstance(class_attr, (list, tuple)):
        class_attr = ' '.join(class_attr)
    return TABLE_CLASS_MARKER in class_attr


def find_wikitable(html_content):
    """Return the first table whose class contains the marker, or None."""
    soup = BeautifulSoup(html_content, 'html.parser')
    return soup.find('table', class_=_has_marker)


def table_rows(table) -> list:
    return table.find_all('tr')


def header_cells(row) -> List[str]:
    return [cell.get_text().strip() for cell in row.find_all(['th', 'td'], recursive=False)]


def data_cells(row) -> List[str]:
    return [cell.get_text().strip() for cell in row.find_all('td', recursive=False)]


def parse_table_rows(rows) -> SectionTable:
    """Split the rows of a marked table into header and data cells.

    The first row supplies `header` (th and td cells); every later row with
    at least one td cell is returned in `rows`. Later th-only rows, such as
    repeated headings, are dropped.
    """
    if not rows:
        return SectionTable()

    parsed = SectionTable(header=header_cells(rows[0]))
    for row in rows[1:]:
        cells = data_cells(row)
        if not cells:
            continue
        parsed.rows.append(cells)
    return parsed
