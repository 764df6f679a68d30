"""Turn the model's raw text into a ClassifiedReply.

The model is told to answer with bare JSON for plans and recipes, but it
sometimes wraps the object in a markdown code fence. Two candidates are tried
(whole text, then fence body) and the first one that validates as a known shape
wins. JSON quoted inside prose is not pulled out: such a reply is plain chat.
"""
import json
import re
from json import JSONDecodeError
from typing import Iterator

from pydantic import ValidationError as SchemaError

from assistant.domain.Reply import STRUCTURED_REPLY_ADAPTER, ChatReply, ClassifiedReply

_FENCE_RE = re.compile(r"^```(?:json)?\s*\n?(.*?)```$", re.S | re.I)


def _strip_code_fences(text: str) -> str:
    """Body of a reply that is one markdown code fence, or the text unchanged."""
    m = _FENCE_RE.match(text.strip())
    return m.group(1).strip() if m else text.strip()


def _remove_trailing_commas(text: str) -> str:
    return re.sub(r",\s*(\}|\])", r"\1", text)


def _candidates(text: str) -> Iterator[str]:
    whole = text.strip()
    yield whole
    stripped = _strip_code_fences(whole)
    if stripped != whole:
        yield stripped


def _load(candidate: str):
    try:
        return json.loads(candidate)
    except JSONDecodeError:
        pass
    try:
        return json.loads(_remove_trailing_commas(candidate))
    except JSONDecodeError:
        return None


def parse_reply(text: str) -> ClassifiedReply:
    """Classify raw model output as PlanReply, RecipeReply or ChatReply."""
    text = text if isinstance(text, str) else ""
    if "{" in text:
        for candidate in _candidates(text):
            data = _load(candidate)
            if not isinstance(data, dict):
                continue
            try:
                return STRUCTURED_REPLY_ADAPTER.validate_python(data)
            except SchemaError:
                continue
    return ChatReply(text=text)


__all__ = ['parse_reply']
