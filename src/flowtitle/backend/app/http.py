"""JSON error payloads for the API blueprints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from flask import jsonify, request

API_PREFIX = "/api/"


@dataclass(frozen=True)
class ProblemResponse:
    """Error payload returned by API endpoints."""

    error: str
    status: int
    message: str | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error, "status": self.status}
        if self.message:
            payload["message"] = self.message
        return payload

    def to_response(self) -> tuple[Any, int]:
        return jsonify(self.as_dict()), self.status


def wants_problem_response() -> bool:
    """Return ``True`` for requests addressed to the JSON API."""

    return request.path.startswith(API_PREFIX)


__all__ = ["API_PREFIX", "ProblemResponse", "wants_problem_response"]
