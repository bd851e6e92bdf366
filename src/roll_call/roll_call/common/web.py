from __future__ import annotations

from functools import wraps
from typing import Any, Dict

from flask import jsonify, request, session


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"message": "Authentication required"}), 401
        return view(*args, **kwargs)

    return wrapper


def json_body() -> Dict[str, Any]:
    """Request JSON as a dict; anything else reads as an empty body."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def store_error_response(message: str):
    # Driver details stay in the log, never in the response.
    return jsonify({"message": message}), 500
