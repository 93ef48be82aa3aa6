from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from focus_group.config import Participant, SubTopic


@pytest.fixture
def participants() -> list[Participant]:
    return [
        Participant(id="p1", name="王小明", role="工程師", tags=("男", "35歲", "技術")),
        Participant(id="p2", name="林雅婷", role="上班族", tags=("女", "28歲")),
        Participant(id="p3", name="陳大同", role="學生", tags=()),
    ]


@pytest.fixture
def sub_topics() -> list[SubTopic]:
    return [SubTopic(id="1", content="第一印象"), SubTopic(id="2", content="價格看法")]


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a focusgroup.yaml into tmp_path and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "focusgroup.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


MINIMAL_CONFIG = "\n".join(
    [
        "topic: 新產品使用體驗",
        "rounds: 2",
        "participants:",
        "  - id: p1",
        "    name: 王小明",
        "    role: 工程師",
        "    tags: [男, 35歲]",
        "  - id: p2",
        "    name: 林雅婷",
        "    role: 上班族",
        "    tags: 女, 28歲",
        "workdir: ./work",
        "",
    ]
)
