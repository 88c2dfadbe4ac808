from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import query_int, token_required
from ..container import Container
from ..core.constants import DEFAULT_AUDIT_LIMIT
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/admin/audit-logs", methods=["GET"], endpoint="audit_logs")
    @token_required
    def audit_logs():
        limit = query_int("limit", DEFAULT_AUDIT_LIMIT)
        offset = query_int("offset", 0)
        if limit < 1 or limit > 1000 or offset < 0:
            raise ValidationError("Paginação inválida")
        entries = container.audit_repo.list_recent(limit=limit, offset=offset)
        return jsonify([e.to_dict() for e in entries])
