"""Shared fixtures: a throwaway Firebase project on disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

FUNCTIONS = ["userCreate", "userDelete", "apiGetV2", "apiPostV2", "cronDaily"]
FAKE_FIREBASE = "/usr/local/bin/firebase"


def write_project(
    root: Path,
    functions: Any = FUNCTIONS,
    config: Optional[Any] = None,
    source_dir: Optional[str] = "functions",
) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    if functions is not None:
        (root / "functions.json").write_text(json.dumps(functions), encoding="utf-8")
    if config is None:
        config = {"functions": {"source": "functions"}}
    if config is not False:
        (root / "firebase.json").write_text(json.dumps(config), encoding="utf-8")
    if source_dir:
        (root / source_dir).mkdir(exist_ok=True)
    return root


@pytest.fixture
def project(tmp_path: Path) -> Path:
    return write_project(tmp_path / "app")


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    def _make(**kwargs: Any) -> Path:
        return write_project(tmp_path / "app", **kwargs)

    return _make


@pytest.fixture
def fake_which() -> Callable[[str], Optional[str]]:
    def _which(command: str) -> Optional[str]:
        return FAKE_FIREBASE if command == "firebase" else None

    return _which
