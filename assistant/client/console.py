"""Console front end: chat with the assistant, list and edit plans, page through weeks.

Run with ``python -m assistant.client.console --url http://localhost:8000``.
"""
import argparse
import sys
from datetime import date
from typing import Callable, Dict, List, Optional

from assistant.client.chat_client import AssistantClient, ClientError, DEFAULT_BASE_URL
from assistant.domain.PlanEntry import PlanEntry
from assistant.logic.week.plan_list import plan_rows, visible_plans
from assistant.logic.week.week_view import WeekView, render_week, shift_week

WELCOME = "Welcome! Tell me about your plans, or ask me for a recipe."
NO_REPLY = "Sorry, no usable reply from the assistant."
HELP = "Commands: /plans, /add <YYYY-MM-DD> <item>, /delete <id>, /week [+N|-N|0], /quit"


class ConsoleState:
    """What the console shows: the week being viewed and the last plans pulled from the server."""

    def __init__(self, today: Optional[date] = None):
        self.today = today or date.today()
        self.week_reference = self.today
        self.plans: List[PlanEntry] = []

    def set_plans(self, raw_plans: List[dict]):
        entries = [PlanEntry.from_dict(p) for p in raw_plans]
        self.plans = visible_plans([p for p in entries if p is not None], self.today)


def render_recipe(recipe: Dict) -> str:
    cuisine = recipe.get("cuisine")
    text = f"Recipe: {recipe.get('name', '')}" + (f" ({cuisine})" if cuisine else "") + "\n\n"
    if recipe.get("health_tip"):
        text += f"Health tip: {recipe['health_tip']}\n\n"
    text += "Ingredients:\n" + "\n".join(f"• {i}" for i in recipe.get("ingredients", [])) + "\n\n"
    text += "Steps:\n" + "\n".join(f"{n}. {s}" for n, s in enumerate(recipe.get("instructions", []), start=1))
    text += "\n\nEnjoy your meal!"
    return text


def render_reply(data: Dict) -> str:
    """Text for one /chat response, by its type."""
    kind = data.get("type")
    if kind == "plan_saved" and data.get("plan"):
        return data.get("reply") or NO_REPLY
    if kind == "recipe" and data.get("recipe"):
        return render_recipe(data["recipe"])
    if kind == "chat_reply" and data.get("reply"):
        return data["reply"]
    return NO_REPLY


def render_plan_list(plans: List[PlanEntry], today: Optional[date] = None) -> str:
    rows = plan_rows(plans, today)
    if not rows:
        return "No plans yet."
    lines = []
    for row in rows:
        cd = f" ({row['countdown']['text']})" if row["countdown"] else ""
        lines.append(f"{row['display_date']}{cd}  {row['item']}  [{row['id']}]")
    return "\n".join(lines)


def render_week_text(view: WeekView) -> str:
    lines = [view.label]
    for cell in view.days:
        marker = "*" if cell.is_today else " "
        events = "; ".join(cell.events)
        lines.append(f"{marker} {cell.weekday[:3]} {cell.date}  {events}".rstrip())
    return "\n".join(lines)


def _say(out: Callable[[str], None], text: str):
    out(f"AI: {text}")


def refresh(client: AssistantClient, state: ConsoleState, out: Callable[[str], None]):
    try:
        state.set_plans(client.plans())
    except ClientError as e:
        _say(out, f"Failed to load plans, please try again later. ({e})")
    out(render_week_text(render_week(state.week_reference, state.plans, state.today)))


def handle_line(line: str, client: AssistantClient, state: ConsoleState, out: Callable[[str], None]) -> bool:
    """Process one input line. Returns False when the user asked to quit."""
    line = line.strip()
    if not line:
        return True
    if line in ("/quit", "exit"):
        return False
    if line == "/help":
        out(HELP)
    elif line == "/plans":
        refresh(client, state, out)
        out(render_plan_list(state.plans, state.today))
    elif line.startswith("/week"):
        arg = line[len("/week"):].strip() or "0"
        try:
            step = int(arg)
        except ValueError:
            out(HELP)
            return True
        state.week_reference = state.today if step == 0 else shift_week(state.week_reference, step)
        out(render_week_text(render_week(state.week_reference, state.plans, state.today)))
    elif line.startswith("/add"):
        parts = line.split(maxsplit=2)
        if len(parts) < 3:
            _say(out, "Please give both a date and an item.")
            return True
        try:
            client.add_plan(parts[1], parts[2])
            _say(out, "Plan added.")
            refresh(client, state, out)
        except ClientError as e:
            _say(out, f"Failed to add plan: {e}")
    elif line.startswith("/delete"):
        parts = line.split(maxsplit=1)
        if len(parts) < 2:
            out(HELP)
            return True
        try:
            client.delete_plan(parts[1].strip())
            _say(out, "Plan deleted.")
            refresh(client, state, out)
        except ClientError as e:
            _say(out, f"Failed to delete plan: {e}")
    else:
        try:
            data = client.send_message(line)
        except ClientError as e:
            _say(out, f"Sorry, something went wrong talking to the assistant: {e} Please try again later.")
            return True
        _say(out, render_reply(data))
        if data.get("type") == "plan_saved":
            refresh(client, state, out)
    return True


def run(client: AssistantClient, state: ConsoleState, read: Callable[[str], str] = input,
        out: Callable[[str], None] = print):
    _say(out, WELCOME)
    try:
        for record in client.history():
            prefix = "You" if record.get("role") == "user" else "AI"
            out(f"{prefix}: {record.get('content', '')}")
    except ClientError as e:
        out(f"(history unavailable: {e})")
    refresh(client, state, out)
    out(HELP)
    while True:
        try:
            line = read("\nYou: ")
        except (EOFError, KeyboardInterrupt):
            break
        if not handle_line(line, client, state, out):
            break


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Chat with the personal assistant from a terminal.")
    parser.add_argument("--url", default=DEFAULT_BASE_URL, help=f"backend base URL (default {DEFAULT_BASE_URL})")
    args = parser.parse_args(argv)
    with AssistantClient(args.url) as client:
        run(client, ConsoleState())
    return 0


if __name__ == "__main__":
    sys.exit(main())
