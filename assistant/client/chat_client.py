"""HTTP client for the assistant API, used by the console front end."""
import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"


class ClientError(Exception):
    """A failed call, carrying the text to show the user."""


class AssistantClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 90.0,
                 transport: Optional[httpx.BaseTransport] = None):
        self._http = httpx.Client(base_url=base_url, timeout=timeout, transport=transport)

    def close(self):
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _request(self, method: str, path: str, json: Optional[dict] = None) -> Any:
        try:
            response = self._http.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.error("Request %s %s failed: %s", method, path, e)
            raise ClientError(f"Cannot reach the assistant backend: {e}")
        if response.is_error:
            raise ClientError(_error_text(response))
        return response.json()

    def send_message(self, message: str) -> Dict[str, Any]:
        return self._request("POST", "/chat", {"message": message})

    def history(self) -> List[Dict[str, str]]:
        return self._request("GET", "/history")

    def plans(self) -> List[Dict[str, str]]:
        return self._request("GET", "/get_plans")

    def add_plan(self, date: str, item: str) -> Dict[str, Any]:
        return self._request("POST", "/add_plan", {"date": date, "item": item})

    def delete_plan(self, plan_id: str) -> Dict[str, Any]:
        return self._request("POST", "/delete_plan", {"id": plan_id})


def _error_text(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return f"Backend returned error: {response.status_code} {response.reason_phrase}"
    if isinstance(data, dict) and (data.get("error") or data.get("detail")):
        return str(data.get("error") or data.get("detail"))
    return f"Backend returned error: {response.status_code} {response.reason_phrase}"


__all__ = ['AssistantClient', 'ClientError', 'DEFAULT_BASE_URL']
