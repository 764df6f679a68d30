"""One chat turn: build the model context, call the model once, act on the classified reply.

- plan: store a PlanEntry; history gets a synthetic confirmation, not the raw JSON
- recipe: nothing stored in the plan book; history gets the recipe name only
- anything else: history gets the user message and the model text verbatim
"""
import logging
from datetime import date
from typing import Callable, Dict, List, Optional

from assistant.domain.HistoryRecord import HistoryRecord
from assistant.domain.PlanEntry import PlanEntry
from assistant.domain.Reply import PlanReply, RecipeReply
from assistant.infra.History_Repository import HistoryRepository
from assistant.infra.Plan_Repository import PlanRepository
from assistant.logic.chat.reply_parser import parse_reply
from assistant.utilities.constants import (
    MAX_HISTORY_LENGTH,
    PLAN_HISTORY_LINE,
    PLAN_SAVED_REPLY,
    RECIPE_HISTORY_LINE,
    RECIPE_REPLY,
)
from assistant.utilities.errors import ValidationError

logger = logging.getLogger(__name__)

Messages = List[Dict[str, str]]

CHAT_REPLY = "chat_reply"
PLAN_SAVED = "plan_saved"
RECIPE = "recipe"


class ChatOutcome:
    def __init__(self, reply: str, type: str, plan: Optional[PlanEntry] = None,
                 recipe: Optional[RecipeReply] = None):
        self.reply = reply
        self.type = type
        self.plan = plan
        self.recipe = recipe

    def to_dict(self):
        out = {"reply": self.reply, "type": self.type}
        if self.plan is not None:
            out["plan"] = self.plan.to_dict()
        if self.recipe is not None:
            out["recipe"] = self.recipe.to_dict()
        return out


def build_messages(system_prompt: Dict[str, str], history: List[HistoryRecord], user_message: str) -> Messages:
    return [system_prompt] + [r.to_message() for r in history] + [{"role": "user", "content": user_message}]


def handle_message(message: str,
                   complete: Callable[[Messages], str],
                   system_prompt: Callable[[Optional[date]], Dict[str, str]],
                   plans: PlanRepository,
                   history: HistoryRepository,
                   max_history: int = MAX_HISTORY_LENGTH) -> ChatOutcome:
    """Run one chat turn. Errors from ``complete`` propagate untouched, nothing is persisted then."""
    message = (message or "").strip() if isinstance(message, str) else ""
    if not message:
        raise ValidationError("Message is required")

    messages = build_messages(system_prompt(None), history.context_window(max_history), message)
    raw = complete(messages)
    reply = parse_reply(raw)

    if isinstance(reply, PlanReply):
        plan = plans.add_plan(reply.date, reply.item)
        history.append(
            HistoryRecord.user(message),
            HistoryRecord.assistant(PLAN_HISTORY_LINE.format(item=plan.item, date=plan.date)),
        )
        logger.info("Chat classified as plan: %s", plan)
        return ChatOutcome(PLAN_SAVED_REPLY.format(item=plan.item, date=plan.date), PLAN_SAVED, plan=plan)

    if isinstance(reply, RecipeReply):
        history.append(
            HistoryRecord.user(message),
            HistoryRecord.assistant(RECIPE_HISTORY_LINE.format(name=reply.name)),
        )
        logger.info("Chat classified as recipe: %s", reply.name)
        return ChatOutcome(RECIPE_REPLY, RECIPE, recipe=reply)

    history.append(HistoryRecord.user(message), HistoryRecord.assistant(raw))
    return ChatOutcome(raw, CHAT_REPLY)


__all__ = ['ChatOutcome', 'build_messages', 'handle_message', 'CHAT_REPLY', 'PLAN_SAVED', 'RECIPE']
