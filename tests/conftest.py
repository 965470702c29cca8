"""Pytest configuration and shared fixtures for Tooly tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

# HS256 token whose header is {"alg":"HS256"} and payload {"sub":"1234567890"}
HS256_JWT = "eyJhbGciOiJIUzI1NiJ9.eyJzdWIiOiIxMjM0NTY3ODkwIn0.signature"


@pytest.fixture
def hs256_jwt() -> str:
    """Return a minimal HS256 JWT."""
    return HS256_JWT


@pytest.fixture
def nested_document() -> dict[str, Any]:
    """Return a nested JSON document with objects, arrays and every leaf kind."""
    return {
        "name": "Tooly",
        "version": 1.5,
        "active": True,
        "owner": None,
        "tags": ["json", "base64", "日本語"],
        "users": [
            {"id": 1, "roles": ["admin", "dev"]},
            {"id": 2, "roles": []},
        ],
        "settings": {"theme": {"dark": True}, "empty": {}},
    }


@pytest.fixture
def write_text(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes a UTF-8 text file under tmp_path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
