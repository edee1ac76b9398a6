from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_errors
from ..common.time_window import window_between
from ..container import Container
from ..core.constants import DEFAULT_LEADERBOARD_SIZE, DEFAULT_WEEK_STARTS_ON
from ..core.enums import PeriodKind

DEFAULT_SERIES_COUNT = {
    PeriodKind.WEEK: 5,
    PeriodKind.MONTH: 3,
    PeriodKind.QUARTER: 4,
}


def register(app: Flask, container: Container) -> None:
    engine = container.engine
    leaderboard_size = int(app.config.get("LEADERBOARD_SIZE", DEFAULT_LEADERBOARD_SIZE))
    week_starts_on = int(app.config.get("WEEK_STARTS_ON", DEFAULT_WEEK_STARTS_ON))

    @app.route("/api/achievement/<owner_id>", endpoint="achievement_current")
    @json_errors
    async def achievement(owner_id: str):
        start, end = request.args.get("start"), request.args.get("end")
        if start and end:
            start_date, end_date = parse_iso_date(start), parse_iso_date(end)
            if end_date < start_date:
                return jsonify({"success": False, "message": "end must not be before start"}), 400
            window = window_between(start_date, end_date, week_starts_on)
            score = await engine.compute_achievement(owner_id, window)
        else:
            score = await engine.current_week(owner_id)
        return jsonify({"success": True, **score.as_dict()})

    @app.route("/api/achievement/<owner_id>/series/<period>", endpoint="achievement_series")
    @json_errors
    async def series(owner_id: str, period: str):
        try:
            kind = PeriodKind(period)
        except ValueError:
            return jsonify({"success": False, "message": f"Unknown period: {period}"}), 400
        count = request.args.get("count", default=DEFAULT_SERIES_COUNT[kind], type=int)
        result = await engine.compute_series(owner_id, kind, count)
        return jsonify({"success": True, **result.as_dict()})

    @app.route("/api/achievement/<owner_id>/compare", endpoint="achievement_compare")
    @json_errors
    async def compare(owner_id: str):
        comparison = await engine.compare_with_previous(owner_id)
        return jsonify({"success": True, **comparison.as_dict()})

    @app.route("/api/achievement/<owner_id>/best", endpoint="achievement_best")
    @json_errors
    async def best(owner_id: str):
        pb = await engine.personal_best(owner_id)
        return jsonify(
            {"success": True, "highest": pb.highest, "average": pb.average, "report_count": pb.report_count}
        )

    @app.route("/api/targets/<owner_id>", endpoint="targets_current")
    @json_errors
    async def targets(owner_id: str):
        config = await engine.resolve_targets(owner_id)
        return jsonify({"success": True, **config.as_dict()})

    @app.route("/api/leaderboard", endpoint="leaderboard")
    @json_errors
    async def leaderboard():
        n = request.args.get("n", default=leaderboard_size, type=int)
        entries = await engine.rank_leaderboard(n)
        return jsonify({"success": True, "entries": [e.as_dict() for e in entries]})
