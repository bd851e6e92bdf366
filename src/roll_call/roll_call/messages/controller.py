from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.web import json_body, login_required, store_error_response
from ..core.constants import NO_ACTIVE_MESSAGES
from ..core.exceptions import StoreError, ValidationError
from ..container import Container
from .model import NewMessage

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/messages", methods=["POST"], endpoint="create_message")
    @login_required
    def create_message():
        try:
            new = NewMessage.from_dict(json_body())
            message = container.message_service.create_message(new)
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except StoreError:
            logger.exception("Error creating message")
            return store_error_response("Error creating message")

        return jsonify({"message": "Message created successfully", "newMessage": message.to_dict()}), 201

    @app.route("/messages", methods=["GET"], endpoint="list_active_messages")
    @login_required
    def list_active_messages():
        try:
            messages = container.message_service.list_active_messages()
        except StoreError:
            logger.exception("Error fetching active messages")
            return store_error_response("Error fetching messages")

        if not messages:
            return jsonify({"message": NO_ACTIVE_MESSAGES}), 200
        return jsonify([m.to_dict() for m in messages]), 200
