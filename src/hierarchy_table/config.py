"""Configuration constants for hierarchy-table."""

from pathlib import Path

# Namespace prefix for uids of top-level nodes.
ROOT_NAMESPACE: str = "root"

# Random disambiguator appended to every uid, in bytes (hex encoded, 32 bits).
UID_TOKEN_BYTES: int = 4

# Input file location. First file found is used.
DATA_FILES: list[Path] = [
    Path("example-data.json"),
    Path("~/.config/hierarchy-table/data.json").expanduser(),
    Path("~/.local/share/hierarchy-table/data.json").expanduser(),
]


def resolve_data_file() -> Path:
    """Return the first existing data file, falling back to the first candidate."""
    for candidate in DATA_FILES:
        if candidate.is_file():
            return candidate
    return DATA_FILES[0]
