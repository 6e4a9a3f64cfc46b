import csv
import io
import logging
from typing import List, Mapping, Sequence, Union

from . import config
from .models import ExifRecord

RecordLike = Union[ExifRecord, Mapping[str, str]]


def resolve_delimiter(output_format: str) -> str:
    """Maps 'csv'/'tsv' to its delimiter; unknown formats fall back to CSV."""
    key = (output_format or "").lower()
    if key in config.OUTPUT_FORMATS:
        return config.OUTPUT_FORMATS[key]

    logging.warning(f"Unknown format: {output_format}. Writing CSV instead.")
    return config.OUTPUT_FORMATS[config.DEFAULT_FORMAT]


def format_table(records: Sequence[RecordLike], delimiter: str = ",", escape: bool = False) -> str:
    """
    Renders records as a header line plus one line per record.

    Columns always follow config.COLUMN_LABELS. Without `escape`, values are
    joined verbatim, so a value containing the delimiter or a newline breaks
    its row. With `escape`, such values are quoted by the csv module; output
    is identical to the plain join when nothing needs quoting.
    An empty sequence gives an empty string (no header).
    """
    if not records:
        return ""

    rows: List[Sequence[str]] = [config.COLUMN_LABELS]
    rows.extend(_row_values(record) for record in records)

    if escape:
        buf = io.StringIO()
        writer = csv.writer(buf, delimiter=delimiter, lineterminator="\n")
        writer.writerows(rows)
        return buf.getvalue().removesuffix("\n")

    return "\n".join(delimiter.join(row) for row in rows)


def format_csv(records: Sequence[RecordLike], escape: bool = False) -> str:
    return format_table(records, config.OUTPUT_FORMATS['csv'], escape)


def format_tsv(records: Sequence[RecordLike], escape: bool = False) -> str:
    return format_table(records, config.OUTPUT_FORMATS['tsv'], escape)


def _row_values(record: RecordLike) -> List[str]:
    if isinstance(record, ExifRecord):
        return list(record.as_row())
    return [str(record.get(label, config.SENTINEL)) for label in config.COLUMN_LABELS]
