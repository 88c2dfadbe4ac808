from __future__ import annotations

import hmac
import logging
from datetime import date
from functools import wraps
from typing import Optional

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import AuthorizationError, DomainError, NotFoundError, ValidationError
from .validators import require_iso_date

logger = logging.getLogger(__name__)


def token_required(view):
    """Bearer-token guard; open when ``API_TOKEN`` is not configured."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        expected = current_app.config.get("API_TOKEN")
        if expected:
            header = request.headers.get("Authorization", "")
            token = header[7:] if header.startswith("Bearer ") else ""
            if not hmac.compare_digest(token.encode("utf-8"), str(expected).encode("utf-8")):
                raise AuthorizationError("Não autorizado")
        return view(*args, **kwargs)

    return wrapper


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Corpo JSON inválido")
    return data


def query_date(name: str, label: Optional[str] = None) -> date:
    return require_iso_date(request.args.get(name), label or name)


def query_int(name: str, default: Optional[int] = None) -> Optional[int]:
    value = request.args.get(name)
    if value in (None, ""):
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{name} deve ser um número inteiro")


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(AuthorizationError)
    def _unauthorized(e: AuthorizationError):
        return jsonify({"error": str(e)}), 401

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        logger.warning("Unhandled domain error on %s: %s", request.path, e)
        return jsonify({"error": str(e)}), 502

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        logger.exception("Unexpected error on %s %s", request.method, request.path)
        return jsonify({"error": "Erro interno do servidor"}), 500
