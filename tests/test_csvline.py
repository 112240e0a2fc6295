import pytest
from utils.csvline import quote_field, format_csv_line, split_csv_line


def test_quote_field_doubles_embedded_quotes():
    assert quote_field('He said "hi", ok') == '"He said ""hi"", ok"'
    assert quote_field('') == '""'


def test_format_csv_line_quotes_every_field():
    assert format_csv_line(['IATA', 'Airline', 'ICAO']) == '"IATA","Airline","ICAO"'


def test_split_csv_line_unquotes_and_keeps_commas():
    assert split_csv_line('"AA","American Airlines, Inc.","AAL"') == ['AA', 'American Airlines, Inc.', 'AAL']


def test_split_csv_line_handles_unquoted_and_empty_fields():
    assert split_csv_line('AA,,"x"') == ['AA', '', 'x']
    assert split_csv_line('') == ['']


def test_split_csv_line_ignores_line_ending():
    assert split_csv_line('"a","b"\r\n') == ['a', 'b']


@pytest.mark.parametrize("value", [
    'He said "hi", ok',
    '""',
    'a,b,c',
    '  padded  ',
    'Ünïcødé – dash',
])
def test_quote_then_split_recovers_value(value):
    line = format_csv_line(['before', value, 'after'])
    assert split_csv_line(line) == ['before', value, 'after']


def test_helpers_agree_with_csv_module():
    import csv
    import io
    values = ['He said "hi", ok', 'a,b', '', 'Ünï']

    buf = io.StringIO()
    csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator='').writerow(values)
    assert format_csv_line(values) == buf.getvalue()

    assert split_csv_line(buf.getvalue()) == next(csv.reader([buf.getvalue()]))
