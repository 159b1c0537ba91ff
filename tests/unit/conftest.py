"""Shared test fixtures."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from hierarchy_table.core.importer.normalizer import normalize
from hierarchy_table.core.tree.builder import build
from hierarchy_table.models.node import Tree
from tests.unit.fakes import CountingTokens
from tests.unit.sample_data import CUSTOMERS


@pytest.fixture
def tokens() -> CountingTokens:
    return CountingTokens()


@pytest.fixture
def customer_tree(tokens: CountingTokens) -> Tree:
    """Two customers; Acme owns orders (one with lines) and contacts."""
    return build(normalize(CUSTOMERS), token_factory=tokens)


@pytest.fixture
def customers_file(tmp_path: Path) -> Path:
    path = tmp_path / "customers.json"
    path.write_text(json.dumps(CUSTOMERS))
    return path


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru messages at WARNING and above."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)
