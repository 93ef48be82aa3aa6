from __future__ import annotations

import pytest

from conftest import MINIMAL_CONFIG
from focus_group.config import ConfigError, PrintConfig, find_config_path, load_config


def test_load_minimal_config(write_config, tmp_path):
    config = load_config(write_config(MINIMAL_CONFIG))

    assert config.topic == "新產品使用體驗"
    assert config.rounds == 2
    assert [p.id for p in config.participants] == ["p1", "p2"]
    assert config.participants[1].tags == ("女", "28歲")
    assert config.sub_topics == []
    assert config.workdir == (tmp_path / "work").resolve()
    assert config.printing == PrintConfig()


def test_defaults_for_optional_fields(write_config):
    config = load_config(
        write_config("topic: 測試\nparticipants:\n  - name: 甲\n  - name: 乙\n    role: 學生\n")
    )

    assert config.rounds == 3
    assert [p.id for p in config.participants] == ["1", "2"]
    assert config.participants[0].role == ""
    assert config.participants[0].tags == ()


def test_sub_topics_formats(write_config):
    text = MINIMAL_CONFIG + "sub_topics:\n  - 價格\n  - {id: s2, content: 外觀}\n  - '  '\n"

    config = load_config(write_config(text))

    assert [(s.id, s.content) for s in config.sub_topics] == [("1", "價格"), ("s2", "外觀")]


def test_print_section(write_config):
    config = load_config(write_config(MINIMAL_CONFIG + "print:\n  delay_ms: 1500\n"))

    assert config.printing == PrintConfig(delay_ms=1500, cleanup_ms=5000)


@pytest.mark.parametrize(
    "text, message",
    [
        ("participants:\n  - name: 甲\n", "missing required key"),
        ("topic: '  '\nparticipants:\n  - name: 甲\n", "'topic'"),
        ("topic: 測試\nparticipants: []\n", "'participants'"),
        ("topic: 測試\nrounds: 11\nparticipants:\n  - name: 甲\n", "'rounds'"),
        ("topic: 測試\nrounds: yes\nparticipants:\n  - name: 甲\n", "'rounds'"),
        ("topic: 測試\nparticipants:\n  - id: a\n    name: 甲\n  - id: a\n    name: 乙\n", "Duplicate participant id"),
        ("topic: 測試\nparticipants:\n  - role: 學生\n", "name"),
        ("topic: 測試\nparticipants:\n  - name: 甲\nprint:\n  delay_ms: -1\n", "print.delay_ms"),
        ("- just a list\n", "mapping"),
    ],
)
def test_invalid_configs(write_config, text, message):
    with pytest.raises(ConfigError) as info:
        load_config(write_config(text))

    assert message.lower() in str(info.value).lower()


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_find_config_path_default(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert find_config_path(None) == tmp_path / "focusgroup.yaml"
    assert str(find_config_path("other.yaml")) == "other.yaml"
