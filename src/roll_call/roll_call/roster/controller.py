from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.web import login_required, store_error_response
from ..core.exceptions import StoreError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/students", methods=["GET"], endpoint="list_students")
    @login_required
    def list_students():
        try:
            roster = container.roster_service.list_students_with_today_status()
        except StoreError:
            logger.exception("Error fetching students with attendance")
            return store_error_response("Error fetching students with attendance")

        return jsonify([entry.to_dict() for entry in roster]), 200
