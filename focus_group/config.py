# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `focusgroup.yaml`, validating the participant
roster and agenda, and normalizing paths so that downstream actions can rely on
a typed config object.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml


MIN_ROUNDS = 1
MAX_ROUNDS = 10


@dataclass(frozen=True)
class Participant:
    """
    A configured persona taking part in the discussion.

    Attributes:
        id:
            Stable identifier. Used as avatar seed, so renaming a participant
            does not change their avatar.
        name:
            Display name. Speaker labels are matched against it first.
        role:
            Role description (e.g. "工程師"). Used as fallback match.
        tags:
            Ordered descriptive tags (e.g. "女", "35歲").
        system_prompt:
            Behaviour instructions for the text generator.
    """

    id: str
    name: str
    role: str
    tags: tuple[str, ...] = ()
    system_prompt: str = ""


@dataclass(frozen=True)
class SubTopic:
    """Agenda item shown in the settings summary."""

    id: str
    content: str


@dataclass(frozen=True)
class PrintConfig:
    """
    Timing of the print surface.

    Attributes:
        delay_ms:
            Delay after the document has loaded before the print dialog opens,
            so that avatar images can finish loading.
        cleanup_ms:
            Delay before the temporary document is removed again.
    """

    delay_ms: int = 800
    cleanup_ms: int = 5000


@dataclass(frozen=True)
class SessionConfig:
    """
    Parsed configuration for a focus group session.

    Attributes:
        config_path:
            Path to the YAML config file used for this run.
        base_dir:
            Directory that relative paths are resolved against.
        topic:
            Discussion topic.
        rounds:
            Target number of discussion rounds.
        sub_topics:
            Ordered agenda items. May be empty (free discussion).
        participants:
            Participant roster.
        workdir:
            Directory for the raw transcript and parsed turns.
        printing:
            Print surface timing.
    """

    config_path: Path
    base_dir: Path
    topic: str
    rounds: int
    sub_topics: list[SubTopic]
    participants: list[Participant]
    workdir: Path
    printing: PrintConfig


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration is missing, invalid, or cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> Path:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        The resolved Path object (not necessarily existing).
    """

    if cli_path:
        return Path(cli_path)

    return Path.cwd() / "focusgroup.yaml"


def _parse_tags(value: Any, *, context: str) -> tuple[str, ...]:
    if value is None:
        return ()

    if isinstance(value, str):
        value = value.split(",")

    if not isinstance(value, list):
        raise ConfigError(f"{context}.tags must be a list of strings")

    tags: list[str] = []
    for t_idx, tag in enumerate(value, start=1):
        if not isinstance(tag, (str, int, float)):
            raise ConfigError(f"{context}.tags[{t_idx}] must be a string")
        text = str(tag).strip()
        if text:
            tags.append(text)

    return tuple(tags)


def _parse_participants(value: Any) -> list[Participant]:
    """
    Parse and validate the `participants` section from the YAML.

    Each entry is a mapping:

        - id: "p1"              # optional; defaults to the 1-based position
          name: 王小明
          role: 工程師
          tags: [男, 35歲]       # optional; list or comma-separated string
          system_prompt: ...     # optional

    Args:
        value:
            Raw YAML value.

    Returns:
        A list of Participant objects.

    Raises:
        ConfigError:
            If the structure does not match the expected schema or ids are not
            unique.
    """

    if not isinstance(value, list) or not value:
        raise ConfigError("'participants' must be a non-empty list")

    participants: list[Participant] = []
    seen_ids: set[str] = set()

    for idx, item in enumerate(value, start=1):
        context = f"participants[{idx}]"
        if not isinstance(item, dict):
            raise ConfigError(f"Each item in 'participants' must be a mapping (problem at index {idx})")

        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ConfigError(f"{context}.name must be a non-empty string")

        role = item.get("role", "")
        if role is None:
            role = ""
        if not isinstance(role, str):
            raise ConfigError(f"{context}.role must be a string")

        raw_id = item.get("id", idx)
        if not isinstance(raw_id, (str, int)) or not str(raw_id).strip():
            raise ConfigError(f"{context}.id must be a non-empty string")
        participant_id = str(raw_id).strip()
        if participant_id in seen_ids:
            raise ConfigError(f"Duplicate participant id '{participant_id}' ({context})")
        seen_ids.add(participant_id)

        system_prompt = item.get("system_prompt") or ""
        if not isinstance(system_prompt, str):
            raise ConfigError(f"{context}.system_prompt must be a string")

        participants.append(
            Participant(
                id=participant_id,
                name=name.strip(),
                role=role.strip(),
                tags=_parse_tags(item.get("tags"), context=context),
                system_prompt=system_prompt.strip(),
            )
        )

    return participants


def _parse_sub_topics(value: Any) -> list[SubTopic]:
    """Parse the optional `sub_topics` list.

    Supported entry formats:
    - "Content"
    - {id: "...", content: "..."}

    Entries with empty content are skipped, like blank agenda rows in a form.
    """

    if value is None:
        return []

    if not isinstance(value, list):
        raise ConfigError("'sub_topics' must be a list if provided")

    out: list[SubTopic] = []
    for idx, item in enumerate(value, start=1):
        if isinstance(item, str):
            content = item
            sub_id = str(idx)
        elif isinstance(item, dict):
            content = item.get("content")
            sub_id = str(item.get("id", idx))
            if content is None:
                content = ""
            if not isinstance(content, str):
                raise ConfigError(f"sub_topics[{idx}].content must be a string")
        else:
            raise ConfigError(f"Each item in 'sub_topics' must be a string or mapping (problem at index {idx})")

        if not content.strip():
            continue

        out.append(SubTopic(id=sub_id, content=content.strip()))

    return out


def _parse_rounds(value: Any) -> int:
    if value is None:
        return 3

    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError("'rounds' must be an integer")

    if value < MIN_ROUNDS or value > MAX_ROUNDS:
        raise ConfigError(f"'rounds' must be between {MIN_ROUNDS} and {MAX_ROUNDS}")

    return value


def _parse_print(value: Any) -> PrintConfig:
    """
    Parse and validate the optional `print` section.

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return PrintConfig()

    if not isinstance(value, dict):
        raise ConfigError("'print' must be a mapping if provided")

    delay_ms = value.get("delay_ms", PrintConfig.delay_ms)
    cleanup_ms = value.get("cleanup_ms", PrintConfig.cleanup_ms)

    for key, number in (("delay_ms", delay_ms), ("cleanup_ms", cleanup_ms)):
        if isinstance(number, bool) or not isinstance(number, int):
            raise ConfigError(f"print.{key} must be an integer")
        if number < 0:
            raise ConfigError(f"print.{key} must be >= 0")

    return PrintConfig(delay_ms=delay_ms, cleanup_ms=cleanup_ms)


def load_config(path: Path) -> SessionConfig:
    """
    Load and validate a `focusgroup.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.

    Returns:
        A validated SessionConfig instance.

    Raises:
        ConfigError:
            If the file is missing, unreadable, cannot be parsed as YAML, or is
            missing required keys.
    """

    if not path.exists():
        raise ConfigError(
            "No focusgroup.yaml found in current directory and no --config provided. "
            "Use the 'template' command to create one or pass --config PATH."
        )
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    missing = [k for k in ("topic", "participants") if k not in raw]
    if missing:
        raise ConfigError(f"Config is missing required key(s): {', '.join(missing)}")

    topic = raw.get("topic")
    if not isinstance(topic, str) or not topic.strip():
        raise ConfigError("'topic' must be a non-empty string")

    workdir = raw.get("workdir", "./work")
    if not isinstance(workdir, str) or not workdir.strip():
        raise ConfigError("'workdir' must be a non-empty string")

    # Interpret workdir relative to config file location.
    base_dir = path.parent.resolve()

    return SessionConfig(
        config_path=path.resolve(),
        base_dir=base_dir,
        topic=topic.strip(),
        rounds=_parse_rounds(raw.get("rounds")),
        sub_topics=_parse_sub_topics(raw.get("sub_topics")),
        participants=_parse_participants(raw.get("participants")),
        workdir=(base_dir / workdir).resolve(),
        printing=_parse_print(raw.get("print")),
    )
