# -*- coding: utf-8 -*-
"""Location: ./tests/unit/mint_format/conftest.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Shared fixtures for the MINT unit tests.
"""

# Third-Party
import pytest

# First-Party
from mint_format.config import get_settings


@pytest.fixture
def workflow():
    """An agentic workflow document mixing objects and tables."""
    return {
        "workflow": {
            "id": "wf_reconciliation",
            "name": "Invoice Reconciliation",
            "status": "awaiting_review",
        },
        "steps": [
            {"id": 1, "tool": "gmail_search", "status": "completed", "duration": "7s"},
            {"id": 2, "tool": "document_parser", "status": "completed", "duration": "32s"},
            {"id": 3, "tool": "sheets_lookup", "status": "completed", "duration": "16s"},
            {"id": 4, "tool": "slack_notify", "status": "pending", "duration": None},
        ],
        "messages": [
            {"role": "user", "content": "Run invoice reconciliation"},
            {"role": "assistant", "content": "Starting process..."},
        ],
    }


@pytest.fixture
def users():
    """A two-row table-eligible array."""
    return {"users": [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]}


@pytest.fixture
def clean_settings(monkeypatch):
    """Clear MINT_* environment variables and the cached settings around a test."""
    for key in ("MINT_INDENT", "MINT_COMPACT", "MINT_SORT_KEYS", "MINT_STRICT", "MINT_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
