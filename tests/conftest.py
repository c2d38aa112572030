"""Shared pytest fixtures for translation pack tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import structlog

from langhost.i18n.service import TranslationService


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def translation_root(tmp_path: Path) -> Path:
    root = tmp_path / "translation"
    root.mkdir()
    return root


@pytest.fixture
def write_pack(translation_root: Path):
    def _write(name: str, payload, *, raw: bool = False, encoding: str = "utf-8") -> Path:
        path = translation_root / f"{name}.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        text = payload if raw else json.dumps(payload, ensure_ascii=False)
        path.write_text(text, encoding=encoding)
        return path

    return _write


@pytest.fixture
def service(translation_root: Path) -> TranslationService:
    return TranslationService(translation_root=translation_root)


@pytest.fixture
def greeting_pack() -> dict:
    return {
        "greet": {"en": "Hello {0}", "ru": "Привет {0}"},
        "ready.markedready": {"en": "Marked as ready", "ru": "Готов"},
        "pracc.blind": {"en": "{0} blinded you for {1:.1f}s"},
    }
