"""Read record files from disk into RawRecords."""

import json
from pathlib import Path

from loguru import logger

from hierarchy_table.core.importer.normalizer import normalize
from hierarchy_table.models.node import RawRecord


def load_records(path: Path, *, strict: bool = False) -> tuple[RawRecord, ...]:
    """Parse a JSON file and normalize its contents.

    Args:
        path: JSON file holding either the nested or the flat record shape.
        strict: Passed through to ``normalize``.

    Returns:
        Tuple of RawRecords (empty if the JSON has an unrecognized shape).

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    records = normalize(data, strict=strict)
    logger.debug("Loaded {} top-level records from {}", len(records), path)
    return records
