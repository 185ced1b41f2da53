"""Groq Service - chat-completion call that turns a prompt into GLSL."""

import logging
import re

import httpx

from shader_generator.prompts.system_prompt import SYSTEM_PROMPT
from shader_generator.prompts.examples import format_examples
from shader_generator.prompts.user_prompt import build_user_prompt
from shader_generator.config import (
    GROQ_API_URL,
    GROQ_MODEL,
    TEMPERATURE,
    REQUEST_TIMEOUT_SECONDS,
    Settings,
)

logger = logging.getLogger(__name__)

# A fence, plus a language tag only when the tag ends its line
_FENCE_RE = re.compile(r"```(?:[\w+-]+[ \t]*(?=\r?\n|\Z))?")


class ShaderGenerationError(Exception):
    """Base class for failures turned into a 500 by the API."""


class ConfigError(ShaderGenerationError):
    """No API credential configured."""


class UpstreamError(ShaderGenerationError):
    """The completion API answered with a non-200 status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Groq API error: {status_code} - {body}")


class TransportError(ShaderGenerationError):
    """No usable response arrived (DNS, connection, timeout, bad encoding)."""


def build_messages(prompt: str) -> list[dict]:
    """System instructions followed by the wrapped user prompt."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT + "\n" + format_examples()},
        {"role": "user", "content": build_user_prompt(prompt)},
    ]


def build_payload(prompt: str) -> dict:
    return {
        "model": GROQ_MODEL,
        "messages": build_messages(prompt),
        "temperature": TEMPERATURE,
    }


def extract_content(payload) -> str:
    """Return choices[0].message.content, or "" when the path is absent."""
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) else ""


def strip_code_fences(text: str) -> str:
    """Remove every markdown fence marker and trim surrounding whitespace."""
    return _FENCE_RE.sub("", text).strip()


async def generate_shader(
    prompt: str, settings: Settings, client: httpx.AsyncClient
) -> str:
    """Generate GLSL fragment-shader source for a prompt.

    Returns the cleaned shader code. Raises ConfigError when no API key is
    set (before any request is made), UpstreamError on a non-200 answer and
    TransportError when the request fails or times out.
    """
    if not settings.groq_api_key:
        logger.error("Groq API key not configured")
        raise ConfigError("API key not configured")

    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {settings.groq_api_key}",
    }

    logger.debug("Sending request to Groq API")
    try:
        response = await client.post(
            GROQ_API_URL,
            json=build_payload(prompt),
            headers=headers,
            timeout=REQUEST_TIMEOUT_SECONDS,
        )
    except httpx.RequestError as e:
        message = f"HTTP request failed: {type(e).__name__}: {e}"
        logger.error(message)
        raise TransportError(message) from e

    if response.status_code != 200:
        err = UpstreamError(response.status_code, response.text)
        logger.error(str(err))
        raise err

    try:
        body = response.json()
    except ValueError:
        err = UpstreamError(response.status_code, response.text)
        logger.error(f"Unreadable response body from Groq API: {err}")
        raise err

    logger.debug("Received successful response from Groq API")
    return strip_code_fences(extract_content(body))
