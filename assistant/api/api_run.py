from fastapi import FastAPI, Request, Query, Body
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from datetime import date as _date
from typing import Optional
import logging

from assistant.api.api_ai import build_system_prompt, complete_chat
from assistant.infra.History_Repository import HistoryRepository
from assistant.infra.Plan_Repository import PlanRepository
from assistant.logic.chat.classifier import handle_message
from assistant.logic.week.dates import parse_plan_date
from assistant.logic.week.plan_list import plan_rows, visible_plans
from assistant.logic.week.week_view import render_week, shift_week
from assistant.utilities.config import TEMPLATES_DIR
from assistant.utilities.errors import AssistantError
from assistant.utilities.validators import ChatInput, PlanDeleteInput, PlanInput, parse_input

# Logging
logger = logging.getLogger("assistant_app")

WELCOME_MESSAGE = "Welcome! Tell me about your plans, or ask me for a recipe."

# Initialize FastAPI app
app = FastAPI(title="Personal Assistant: Chat, Plans & Week Calendar")

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _error_response(e: AssistantError) -> JSONResponse:
    return JSONResponse(status_code=e.status_code, content=e.to_dict())


def _week_payload(start: _date, today: _date):
    plans = visible_plans(PlanRepository().list_plans(), today)
    return render_week(start, plans, today), plans


# -------------------- UI PAGE --------------------
@app.get("/", response_class=HTMLResponse)
def main_page(request: Request, offset: int = Query(default=0)):
    today = _date.today()
    week, plans = _week_payload(shift_week(today, offset), today)
    history = HistoryRepository().read_all()
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "welcome": WELCOME_MESSAGE,
            "history": [r.to_dict() for r in history],
            "plans": plan_rows(plans, today),
            "week": week,
            "offset": offset,
            "today": today.isoformat(),
        },
    )


# -------------------- API: Chat --------------------
@app.post("/chat")
def chat(payload: Optional[dict] = Body(default=None)):
    try:
        data = parse_input(ChatInput, payload, "Message is required")
        outcome = handle_message(
            data.message,
            complete=complete_chat,
            system_prompt=build_system_prompt,
            plans=PlanRepository(),
            history=HistoryRepository(),
        )
    except AssistantError as e:
        logger.error("Error in /chat: %s", e.message)
        return _error_response(e)
    return outcome.to_dict()


@app.get("/history")
def get_history():
    return [r.to_dict() for r in HistoryRepository().read_all()]


# -------------------- API: Plans --------------------
@app.get("/get_plans")
def get_plans():
    return [p.to_dict() for p in PlanRepository().list_plans()]


@app.post("/add_plan")
def add_plan(payload: Optional[dict] = Body(default=None)):
    try:
        data = parse_input(PlanInput, payload, "Date and item are required for adding a plan.")
        plan = PlanRepository().add_plan(data.date, data.item)
    except AssistantError as e:
        return _error_response(e)
    return {"message": "Plan added successfully", "plan": plan.to_dict()}


@app.post("/delete_plan")
def delete_plan(payload: Optional[dict] = Body(default=None)):
    try:
        data = parse_input(PlanDeleteInput, payload, "Plan ID is required for deleting a plan.")
        PlanRepository().delete_plan(data.id)
    except AssistantError as e:
        return _error_response(e)
    return {"message": "Plan deleted successfully"}


# -------------------- API: Week calendar --------------------
@app.get("/api/week")
def get_week(start: Optional[str] = Query(default=None, description="Any day of the week (YYYY-MM-DD)"),
             offset: int = Query(default=0, description="Weeks to move from start")):
    today = _date.today()
    if start:
        reference = parse_plan_date(start)
        if reference is None:
            return JSONResponse(status_code=400, content={"error": "Invalid date format. Expected YYYY-MM-DD"})
    else:
        reference = today
    week, _ = _week_payload(shift_week(reference, offset), today)
    return week.to_dict()
