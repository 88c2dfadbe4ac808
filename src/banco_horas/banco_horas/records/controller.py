from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, query_date, token_required
from ..common.validators import require_iso_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.record_service

    def _range():
        return query_date("start", "Data inicial"), query_date("end", "Data final")

    def _as_list(records):
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/records", methods=["GET"], endpoint="records_by_date")
    @token_required
    def records_by_date():
        return _as_list(service.list_by_date(query_date("date", "Data")))

    @app.route("/api/records/<int:record_id>", methods=["GET"], endpoint="get_record")
    @token_required
    def get_record(record_id: int):
        return jsonify(service.get_record(record_id).to_dict())

    @app.route("/api/records/<int:record_id>", methods=["PUT"], endpoint="edit_record")
    @token_required
    def edit_record(record_id: int):
        data = json_body()
        record = service.edit_record(record_id, data.get("punches"), data.get("reason"))
        return jsonify(record.to_dict())

    @app.route("/api/records/employee/<int:employee_id>", methods=["GET"], endpoint="employee_records")
    @token_required
    def employee_records(employee_id: int):
        start, end = _range()
        return _as_list(service.list_for_employee(employee_id, start, end))

    @app.route("/api/records/employee/<int:employee_id>", methods=["POST"], endpoint="classify_record")
    @token_required
    def classify_record(employee_id: int):
        data = json_body()
        work_date = require_iso_date(data.get("date"), "Data")
        record = service.classify_and_persist(employee_id, work_date, data.get("punches"))
        return jsonify(record.to_dict()), 201

    @app.route("/api/records/leader/<int:leader_id>", methods=["GET"], endpoint="leader_records")
    @token_required
    def leader_records(leader_id: int):
        start, end = _range()
        return _as_list(service.list_for_leader(leader_id, start, end))

    @app.route("/api/records/all", methods=["GET"], endpoint="all_records")
    @token_required
    def all_records():
        start, end = _range()
        return _as_list(service.list_all(start, end))
