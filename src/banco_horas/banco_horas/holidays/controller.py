from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body, token_required
from ..common.validators import require_bool, require_iso_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.holiday_service

    @app.route("/api/holidays", methods=["GET"], endpoint="list_holidays")
    @token_required
    def list_holidays():
        return jsonify([h.to_dict() for h in service.list_all()])

    @app.route("/api/holidays/year/<int:year>", methods=["GET"], endpoint="holidays_for_year")
    @token_required
    def holidays_for_year(year: int):
        return jsonify([h.to_dict() for h in service.list_for_year(year)])

    @app.route("/api/holidays/check/<date_value>", methods=["GET"], endpoint="check_holiday")
    @token_required
    def check_holiday(date_value: str):
        day = require_iso_date(date_value, "Data")
        holiday = service.check(day)
        return jsonify({
            "date": day.isoformat(),
            "isHoliday": holiday is not None,
            "holiday": holiday.to_dict() if holiday else None,
        })

    @app.route("/api/holidays", methods=["POST"], endpoint="create_holiday")
    @token_required
    def create_holiday():
        data = json_body()
        holiday_id = service.create(
            date_value=data.get("date"),
            name=data.get("name"),
            holiday_type=data.get("type"),
            recurring=require_bool(data.get("recurring"), "Recorrente"),
        )
        return jsonify({"success": True, "id": holiday_id}), 201

    @app.route("/api/holidays/<int:holiday_id>", methods=["PUT"], endpoint="update_holiday")
    @token_required
    def update_holiday(holiday_id: int):
        data = json_body()
        service.update(
            holiday_id=holiday_id,
            date_value=data.get("date"),
            name=data.get("name"),
            holiday_type=data.get("type"),
            recurring=require_bool(data.get("recurring"), "Recorrente"),
        )
        return jsonify({"success": True})

    @app.route("/api/holidays/<int:holiday_id>", methods=["DELETE"], endpoint="delete_holiday")
    @token_required
    def delete_holiday(holiday_id: int):
        service.delete(holiday_id=holiday_id)
        return jsonify({"success": True})
