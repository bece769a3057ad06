"""
rcli.csv_convert

Read delimited rows and write them out as JSON, YAML or TOML.
"""

import csv
import logging
from enum import Enum
from typing import List, Union

from .errors import ConversionError
from .storage import atomic_write_bytes, dump_json_bytes, dump_toml_bytes, dump_yaml_bytes

logger = logging.getLogger(__name__)

Record = Union[dict, list]


class OutputFormat(Enum):
    JSON = "json"
    YAML = "yaml"
    TOML = "toml"

    @classmethod
    def parse(cls, value: str) -> "OutputFormat":
        try:
            return cls(value.lower())
        except ValueError:
            names = ", ".join(f.value for f in cls)
            raise ConversionError(f"Unsupported output format {value!r} (choose from {names})") from None


def read_records(path: str, delimiter: str = ",", header: bool = True) -> List[Record]:
    if len(delimiter) != 1:
        raise ConversionError(f"Delimiter must be a single character, got {delimiter!r}")
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            reader = csv.reader(f, delimiter=delimiter)
            # blank lines are skipped; keep the source line number for errors
            rows = [(reader.line_num, row) for row in reader if row]
    except OSError as e:
        raise ConversionError(f"Cannot read {path}: {e}") from e
    except (csv.Error, UnicodeDecodeError) as e:
        raise ConversionError(f"Cannot parse {path}: {e}") from e

    if not header:
        return [row for _, row in rows]
    if not rows:
        return []

    names = rows[0][1]
    records: List[Record] = []
    for lineno, row in rows[1:]:
        if len(row) != len(names):
            raise ConversionError(
                f"{path}:{lineno}: expected {len(names)} fields, found {len(row)}"
            )
        records.append(dict(zip(names, row)))
    return records


def serialize(records: List[Record], fmt: OutputFormat) -> bytes:
    if fmt is OutputFormat.JSON:
        return dump_json_bytes(records)
    if fmt is OutputFormat.YAML:
        return dump_yaml_bytes(records)
    return dump_toml_bytes({"records": records})


def process_csv(
    input_path: str,
    output_path: str,
    fmt: OutputFormat = OutputFormat.JSON,
    delimiter: str = ",",
    header: bool = True,
) -> int:
    """Convert `input_path` to `output_path`. Returns the number of records written."""
    records = read_records(input_path, delimiter=delimiter, header=header)
    atomic_write_bytes(output_path, serialize(records, fmt))
    logger.debug("wrote %d records from %s to %s as %s", len(records), input_path, output_path, fmt.value)
    return len(records)
