# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Prompts for the simulated discussion.

The model must write one utterance per line in the transcript grammar
(`[Label]: (annotation) content`), otherwise the lines are not recognized as
turns.
"""

from typing import Any

import yaml
from openai.types.chat import ChatCompletionMessageParam

from focus_group.config import SessionConfig
from focus_group.transcripts.base import MODERATOR_CODE


def _roster_payload(config: SessionConfig) -> dict[str, Any]:
    return {
        "participants": [
            {
                "name": p.name,
                "role": p.role,
                "tags": list(p.tags),
                "instructions": p.system_prompt or None,
            }
            for p in config.participants
        ],
        "topic": config.topic,
        "sub_topics": [s.content for s in config.sub_topics] or None,
        "rounds": config.rounds,
    }


def build_system_prompt(config: SessionConfig) -> str:
    """Return the system prompt describing personas, agenda and output format."""

    names = "、".join(p.name for p in config.participants)

    system_parts = [
        "你是一位焦點座談模擬器，負責模擬一場真實、自然的焦點團體討論。",
        f"由「{MODERATOR_CODE}」主持，參與者為：{names}。",
        f"討論共進行 {config.rounds} 輪，每一輪每位參與者至少發言一次。",
        "每位參與者必須符合其角色、標籤與個別指示所描述的背景、立場與說話方式。",
    ]

    if config.sub_topics:
        system_parts.append("請依序涵蓋所有子議題，由主持人負責引導與轉換議題。")
    else:
        system_parts.append("沒有特定子議題，由主持人自由引導討論。")

    system_parts.extend(
        [
            "輸出格式：每一次發言獨立成一行，格式為「[發言者名稱]: (動作或語氣) 發言內容」。",
            f"括號中的動作或語氣可以省略。發言者名稱必須與參與者名稱完全一致，主持人一律寫作「[{MODERATOR_CODE}]」。",
            "不要輸出任何標題、編號、說明文字或 Markdown 格式。",
        ]
    )

    return "\n".join(system_parts)


def build_discussion_messages(config: SessionConfig) -> list[ChatCompletionMessageParam]:
    """
    Build the chat messages that start a simulated discussion.

    The session settings are serialized to YAML for readability.
    """

    settings = yaml.safe_dump(_roster_payload(config), sort_keys=False, allow_unicode=True)

    return [
        {"role": "system", "content": build_system_prompt(config)},
        {"role": "user", "content": f"模擬焦點座談：{config.topic}\n\n{settings}"},
    ]
