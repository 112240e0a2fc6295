import csv
import io
from typing import Iterable, List


def format_csv_line(values: Iterable[str]) -> str:
    """Quote every value and join them with commas (no line terminator)."""
    buf = io.StringIO()
    w = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator='')
    w.writerow(values)
    return buf.getvalue()


def quote_field(value: str) -> str:
    """Wrap a value in double quotes, doubling any embedded quotes."""
    return format_csv_line([value])


def split_csv_line(line: str) -> List[str]:
    """Split one line of the combined CSV into unquoted fields.

    An empty line yields a single empty field.
    """
    row = next(csv.reader([line.rstrip('\r\n')]), [])
    return row or ['']
