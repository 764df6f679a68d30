import os
import logging
from datetime import date
from typing import Dict, List, Optional

import openai
from openai import OpenAI

from assistant.utilities.config import LLM_API_KEY_ENV, LLM_BASE_URL, LLM_MODEL, LLM_TIMEOUT
from assistant.utilities.constants import DAY_NAMES, SYSTEM_PROMPT_TEMPLATE
from assistant.utilities.errors import (
    ConfigurationError,
    UnexpectedUpstreamShape,
    UpstreamError,
    UpstreamUnreachable,
)

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to get response from AI model."


# === Helper: Get OpenAI Client ===
def _get_openai_client() -> Optional[OpenAI]:
    """Return an OpenAI-compatible client if the model key is set, otherwise None."""
    api_key = os.environ.get(LLM_API_KEY_ENV)
    if not api_key:
        return None
    # Retries stay off: a failed model call fails the request.
    return OpenAI(api_key=api_key, base_url=LLM_BASE_URL, timeout=LLM_TIMEOUT, max_retries=0)


def build_system_prompt(today: Optional[date] = None) -> Dict[str, str]:
    today = today or date.today()
    content = SYSTEM_PROMPT_TEMPLATE.format(
        today=today.isoformat(),
        weekday=DAY_NAMES[today.isoweekday() - 1],
    ).strip()
    return {"role": "system", "content": content}


def _upstream_status_error(e: openai.APIStatusError) -> Exception:
    body = e.body if isinstance(e.body, dict) else {}
    code = body.get("code")
    message = body.get("message")
    if code and message:
        logger.error("Model service error status=%s code=%s message=%s", e.status_code, code, message)
        return UpstreamError(e.status_code, str(code), str(message))
    logger.error("Model service error status=%s without code/message: %s", e.status_code, e.body)
    return UnexpectedUpstreamShape(GENERIC_FAILURE)


# === Chat completion ===
def complete_chat(messages: List[Dict[str, str]]) -> str:
    """Send ``messages`` in one blocking chat-completions call and return the reply text.

    Raises ConfigurationError before any network traffic when the key is missing,
    UpstreamUnreachable when the service cannot be reached, UpstreamError when it
    answers with a coded error, and UnexpectedUpstreamShape for anything else.
    """
    client = _get_openai_client()
    if client is None:
        logger.error("%s is not set; refusing chat request.", LLM_API_KEY_ENV)
        raise ConfigurationError("Server configuration error: API key missing.")

    try:
        completion = client.chat.completions.create(model=LLM_MODEL, messages=messages)
    except openai.APIConnectionError as e:
        logger.error("Cannot reach model service at %s: %s", LLM_BASE_URL, e)
        raise UpstreamUnreachable("Network problem: unable to reach the AI model service.")
    except openai.APIStatusError as e:
        raise _upstream_status_error(e)
    except openai.OpenAIError as e:
        logger.error("Model call failed: %s", e)
        raise UnexpectedUpstreamShape(GENERIC_FAILURE)

    choices = getattr(completion, "choices", None) or []
    message = getattr(choices[0], "message", None) if choices else None
    content = getattr(message, "content", None)
    if not isinstance(content, str):
        logger.error("Unexpected model response structure or missing content: %r", completion)
        raise UnexpectedUpstreamShape(GENERIC_FAILURE)
    return content


__all__ = ['complete_chat', 'build_system_prompt', 'GENERIC_FAILURE']
