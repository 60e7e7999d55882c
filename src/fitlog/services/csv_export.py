"""CSV export helpers for progress reports."""

from collections.abc import Sequence

CsvValue = str | int | float | None

# Excel needs the BOM to detect UTF-8 in Hebrew exports.
UTF8_BOM = "\ufeff"


def escape_csv_field(value: CsvValue) -> str:
    """Quote a field when it contains a comma, quote or newline."""
    if value is None:
        return ""
    # Whole floats are written the way a spreadsheet shows them: 600, not 600.0.
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value)
    if "," in text or '"' in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def create_csv_row(values: Sequence[CsvValue]) -> str:
    """Join escaped values into one CSV line."""
    return ",".join(escape_csv_field(value) for value in values)


def create_csv_content(
    headers: Sequence[str], rows: Sequence[Sequence[CsvValue]]
) -> str:
    """Build CSV text from headers and rows."""
    return "\n".join([create_csv_row(headers), *(create_csv_row(row) for row in rows)])


def encode_csv(content: str) -> bytes:
    """Encode CSV text as UTF-8 with a byte order mark."""
    return (UTF8_BOM + content).encode("utf-8")
