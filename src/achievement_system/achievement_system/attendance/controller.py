from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.http import json_errors
from ..container import Container
from .classifier import total_hours
from .model import AttendanceRecord


def register(app: Flask, container: Container) -> None:
    engine = container.engine
    attendance = container.attendance_service

    @app.route("/api/attendance/classify", methods=["POST"], endpoint="attendance_classify")
    @json_errors
    async def classify():
        data = request.get_json(silent=True) or {}
        data.setdefault("date", date.today().isoformat())
        record = AttendanceRecord.from_document(data)
        status = engine.classify_attendance(record)
        return jsonify({"success": True, "status": status.value, "total_hours": total_hours(record)})

    @app.route("/api/attendance/<owner_id>/status", endpoint="attendance_status")
    @json_errors
    async def day_status(owner_id: str):
        raw = request.args.get("date")
        work_date = parse_iso_date(raw) if raw else now_local().date()
        status = await attendance.get_day_status(owner_id, work_date)
        return jsonify({"success": True, "date": work_date.isoformat(), "status": status.value})

    @app.route("/api/attendance/<owner_id>/gate", endpoint="attendance_gate")
    @json_errors
    async def gate(owner_id: str):
        decision = await engine.punch_gate(owner_id)
        return jsonify(
            {
                "success": True,
                "action": decision.action.value,
                "allowed": decision.allowed,
                "reason": decision.reason,
                "reopens_at": decision.reopens_at.isoformat() if decision.reopens_at else None,
            }
        )

    @app.route("/api/attendance/<owner_id>/summary", endpoint="attendance_summary")
    @json_errors
    async def summary(owner_id: str):
        today = now_local().date()
        year = request.args.get("year", default=today.year, type=int)
        month = request.args.get("month", default=today.month, type=int)
        if not 1 <= month <= 12:
            return jsonify({"success": False, "message": "month must be 1-12"}), 400
        s = await attendance.monthly_summary(owner_id, year, month, today=today)
        return jsonify(
            {
                "success": True,
                "year": s.year,
                "month": s.month,
                "Present": s.present,
                "Half Day": s.half_day,
                "On Leave": s.on_leave,
                "total_days": s.total_days,
            }
        )

    @app.route("/api/attendance/<owner_id>/week", endpoint="attendance_week")
    @json_errors
    async def week(owner_id: str):
        strip = await attendance.week_strip(owner_id)
        return jsonify(
            {
                "success": True,
                "days": [
                    {"day": d.day, "date": d.work_date.isoformat(), "status": d.status.value if d.status else None}
                    for d in strip
                ],
            }
        )
