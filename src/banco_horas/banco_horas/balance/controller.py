from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_minutes, now_local
from ..common.http import query_int, token_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.balance_service

    @app.route("/api/balance/<int:employee_id>", methods=["GET"], endpoint="employee_balance")
    @token_required
    def employee_balance(employee_id: int):
        year = query_int("year", now_local().year)
        months = service.get_monthly_balance(employee_id, year)
        final = next((m.running_balance for m in reversed(months) if m.running_balance is not None), 0)
        return jsonify({
            "employee_id": employee_id,
            "year": year,
            "months": [m.to_dict() for m in months],
            "balance": final,
            "balance_label": format_minutes(final, signed=True),
        })

    @app.route("/api/balance", methods=["GET"], endpoint="balance_overview")
    @token_required
    def balance_overview():
        year = query_int("year", now_local().year)
        rows = service.year_overview(year, leader_id=query_int("leader_id"))
        return jsonify({"year": year, "employees": [r.to_dict() for r in rows]})
