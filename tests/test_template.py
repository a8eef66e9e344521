"""Tests for topowrite.template."""

from __future__ import annotations

import json
from pathlib import Path

from topowrite.builder import build_items
from topowrite.sorter import sort_items
from topowrite.template import TEMPLATE, write_template


def test_template_is_a_valid_project() -> None:
    result = build_items(json.loads(TEMPLATE))

    assert result.metadata.introduction
    assert result.metadata.conclusion
    assert sort_items(result.items).names == ["b", "c", "a"]


def test_write_template_overwrites_target(tmp_path: Path) -> None:
    target = tmp_path / "example.json"
    target.write_text("old", encoding="utf-8")

    written = write_template(target)

    assert written == target
    assert target.read_text(encoding="utf-8") == TEMPLATE
