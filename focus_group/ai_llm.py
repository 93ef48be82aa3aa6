# Focus Group Simulator
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""
Low-level LLM API wrapper.

This module encapsulates the streaming OpenAI SDK call that produces the
simulated discussion. Only the text deltas are passed on; parsing them is the
session's job.

Environment variables:
    - `LLM_OPENAI_API_KEY`: API key for the OpenAI-compatible endpoint
    - `LLM_OPENAI_MODEL`: Model identifier
    - `LLM_OPENAI_BASE_URL`: Optional explicit base URL (preferred)
    - `LLM_OPENAI_HOST`: Hostname (legacy)
    - `LLM_OPENAI_PATH`: Optional path (legacy)
"""

import os

from typing import Any, AsyncIterator

from openai import AsyncOpenAI
from openai.types.chat import ChatCompletionMessageParam

from focus_group.config import ConfigError


def _require_env(name: str) -> str:
    """
    Get a required environment variable.

    Raises:
        ConfigError:
            If the variable is missing or empty.
    """

    value = os.environ.get(name)
    if not value:
        raise ConfigError(f"Missing required environment variable: {name}")
    return value


def _openai_base_url() -> str:
    """
    Determine the base URL for the OpenAI-compatible endpoint.

    Returns:
        Base URL ending with `/v1`.
    """

    base_url = os.environ.get("LLM_OPENAI_BASE_URL")
    if base_url:
        return base_url.rstrip("/")

    host = _require_env("LLM_OPENAI_HOST")
    path = os.environ.get("LLM_OPENAI_PATH", "")

    # LLM_OPENAI_PATH may point to the full endpoint (e.g. /v1/chat/completions).
    # The OpenAI SDK expects a base URL that ends with /v1.
    if "/v1" in path:
        prefix = path.split("/v1", 1)[0] + "/v1"
    else:
        prefix = "/v1"

    return f"https://{host}{prefix}"


def ai_stream(
    messages: list[ChatCompletionMessageParam],
    *,
    temperature: float | None = None,
) -> AsyncIterator[str]:
    """
    Prepare a streaming chat completion that yields the text deltas.

    The client is configured immediately, so configuration problems surface
    before anything is awaited. The request itself is sent when iteration
    starts.

    Args:
        messages:
            OpenAI chat message list.
        temperature:
            Optional sampling temperature.

    Returns:
        Async iterator over non-empty content deltas in arrival order.

    Raises:
        ConfigError:
            If required environment variables are missing.
    """

    client = AsyncOpenAI(
        api_key=_require_env("LLM_OPENAI_API_KEY"),
        base_url=_openai_base_url(),
    )

    completion_kwargs: dict[str, Any] = {"model": _require_env("LLM_OPENAI_MODEL")}
    if temperature is not None:
        completion_kwargs["temperature"] = temperature

    return _stream_deltas(client, messages, completion_kwargs)


async def _stream_deltas(
    client: AsyncOpenAI,
    messages: list[ChatCompletionMessageParam],
    completion_kwargs: dict[str, Any],
) -> AsyncIterator[str]:
    # openai.APIError on request failures or non-success responses; no retries.
    stream = await client.chat.completions.create(
        messages=messages,
        stream=True,
        **completion_kwargs,
    )

    async for chunk in stream:
        if not chunk.choices:
            continue
        delta = chunk.choices[0].delta.content
        if delta:
            yield delta
