from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, token_required
from ..common.validators import require_iso_date
from ..container import Container
from ..core.constants import SYNC_POLL_INTERVAL_SECONDS
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    manager = container.sync_manager

    @app.route("/api/sync", methods=["POST"], endpoint="start_sync")
    @token_required
    def start_sync():
        data = json_body()
        start = require_iso_date(data.get("startDate"), "Data inicial")
        end = require_iso_date(data.get("endDate"), "Data final")

        leader_id = data.get("leaderId")
        if leader_id is not None:
            try:
                leader_id = int(leader_id)
            except (TypeError, ValueError):
                raise ValidationError("leaderId deve ser um número inteiro")

        job_id = manager.submit(start, end, leader_id=leader_id)
        job = manager.status(job_id)
        return jsonify({
            "success": True,
            "jobId": job_id,
            "totalDays": job.total_days,
            "pollIntervalSeconds": SYNC_POLL_INTERVAL_SECONDS,
            "message": f"Sincronização iniciada para {job.total_days} dias",
        }), 202

    @app.route("/api/sync", methods=["GET"], endpoint="list_syncs")
    @token_required
    def list_syncs():
        return jsonify([j.to_dict() for j in manager.list_jobs()])

    @app.route("/api/sync/<job_id>", methods=["GET"], endpoint="sync_status")
    @token_required
    def sync_status(job_id: str):
        return jsonify(manager.status(job_id).to_dict())
