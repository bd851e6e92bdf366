from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.web import json_body, login_required, store_error_response
from ..core.exceptions import AlreadyMarkedError, NotFoundError, StoreError, ValidationError
from ..container import Container
from .model import AttendanceEntry

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance", methods=["POST"], endpoint="mark_attendance")
    @login_required
    def mark_attendance():
        data = json_body()

        try:
            entries = AttendanceEntry.parse_batch(data.get("attendanceData"))
            records = container.attendance_service.mark_attendance(entries)
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404
        except AlreadyMarkedError as e:
            return jsonify({"message": str(e), "alreadyMarkedRollNumbers": e.roll_numbers}), 400
        except StoreError:
            logger.exception("Error marking attendance")
            return store_error_response("Server error")

        return jsonify({
            "message": "Attendance marked successfully",
            "attendanceRecords": [r.to_dict() for r in records],
        }), 201
