from __future__ import annotations

import logging

from flask import Flask, jsonify, session

from ..common.web import json_body, store_error_response
from ..core.exceptions import AuthenticationError, StoreError, ValidationError
from ..container import Container
from .model import SignupForm

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="health")
    def health():
        return "Server is running", 200

    @app.route("/signup", methods=["POST"], endpoint="signup")
    def signup():
        try:
            form = SignupForm.from_dict(json_body())
            user_id = container.auth_service.signup(form)
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except StoreError:
            logger.exception("Error during signup")
            return store_error_response("Server error")

        return jsonify({"message": "User registered successfully", "userId": user_id}), 201

    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        email = data.get("email")
        password = data.get("password")
        if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
            return jsonify({"message": "Email and password are required"}), 400

        try:
            s_user = container.auth_service.login(email, password)
        except AuthenticationError as e:
            return jsonify({"message": str(e)}), 401
        except StoreError:
            logger.exception("Error during login")
            return store_error_response("Server error")

        session.clear()
        session.permanent = True
        session["user_id"] = s_user.user_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value
        return jsonify({"message": "Login successful", "user": s_user.to_dict()}), 200

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logged out"}), 200
