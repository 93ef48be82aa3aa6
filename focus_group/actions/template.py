# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `focusgroup.yaml` file into the current
directory (or a user-specified path).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from focus_group.config import ConfigError, SessionConfig


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not require a YAML config because it produces one.
    """

    name: str = "template"
    help: str = "Write a template focusgroup.yaml config"
    requires_config: bool = False

    _TEMPLATE_YAML: str = "\n".join(
        [
            "# Discussion topic (required)",
            "topic: 新產品使用體驗",
            "",
            "# Number of discussion rounds (1-10, default 3).",
            "# A round is as many turns as there are participants.",
            "rounds: 3",
            "",
            "# Optional agenda. Leave empty for a free discussion.",
            "# Entries can be strings or mappings with id/content.",
            "sub_topics:",
            "  - 第一印象與購買動機",
            "  - 日常使用的痛點",
            "  - 價格與價值的看法",
            "",
            "# Participant roster (required, non-empty).",
            "# Speaker labels in the generated dialogue are matched against 'name'",
            "# first and 'role' second. The moderator always speaks as [主持人].",
            "# 'id' defaults to the position in the list; it is used as avatar seed,",
            "# so renaming a participant keeps their avatar.",
            "participants:",
            "  - id: p1",
            "    name: 林雅婷",
            "    role: 上班族",
            "    tags: [女, 32歲, 重度使用者]",
            "    system_prompt: 注重效率，說話直接，常舉工作上的實例。",
            "",
            "  - id: p2",
            "    name: 陳志明",
            "    role: 工程師",
            "    tags: [男, 45歲, 技術, 資深]",
            "    system_prompt: 關心規格與可靠度，對行銷說法抱持懷疑。",
            "",
            "  - id: p3",
            "    name: 王美華",
            "    role: 家庭主婦",
            "    tags: [女, 50歲, 價格敏感]",
            "    system_prompt: 重視家人的使用感受與價格，語氣溫和。",
            "",
            "# Working directory for raw.txt, turns.yaml and exports",
            "workdir: ./work",
            "",
            "# Print options (optional; defaults shown)",
            "# print:",
            "#   # Delay after the page has loaded before the print dialog opens,",
            "#   # so avatar images are not missing from the printout.",
            "#   delay_ms: 800",
            "#   # How long the temporary print document is kept before removal.",
            "#   cleanup_ms: 5000",
            "",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `template` subcommand.

        Args:
            parser:
                Subparser for this command.
        """

        parser.add_argument(
            "path",
            nargs="?",
            default="focusgroup.yaml",
            help="Destination path for the template (default: ./focusgroup.yaml)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing file",
        )

    def run(self, args: argparse.Namespace, config: SessionConfig | None) -> None:
        """
        Execute the template writer.

        Raises:
            ConfigError:
                If the destination exists and `--force` is not set.
        """

        _ = config
        dest = Path(args.path)
        if dest.exists() and not args.force:
            raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(self._TEMPLATE_YAML, encoding="utf-8")
        print(f"Wrote template config to: {dest}")
