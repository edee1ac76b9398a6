from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from .achievement.service import AchievementAggregator
from .attendance.classifier import AttendanceClassifier
from .attendance.gate import PunchGate
from .attendance.model import AttendanceRules
from .attendance.service import AttendanceService
from .cache.result_cache import ResultCache
from .core import constants
from .database.connection import DBConfig, DatabaseConnection
from .engine import PerformanceEngine
from .leaderboard.service import LeaderboardRanker
from .records.mysql_record_source import MySQLRecordSource
from .records.repository import RecordSource
from .targets.mysql_target_source import MySQLTargetSource
from .targets.repository import TargetSource
from .targets.service import TargetResolver
from .users.mysql_profile_source import MySQLProfileSource
from .users.repository import ProfileSource
from .users.service import ProfileResolver


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    records_source: RecordSource
    target_source: TargetSource
    profile_source: ProfileSource

    cache: ResultCache
    attendance_service: AttendanceService
    target_resolver: TargetResolver
    achievement_aggregator: AchievementAggregator
    leaderboard_ranker: LeaderboardRanker
    engine: PerformanceEngine


def _setting(settings: Any, name: str, default: Any) -> Any:
    return getattr(settings, name, default) if settings is not None else default


def assemble(
    *,
    records: RecordSource,
    targets: TargetSource,
    profiles: ProfileSource,
    auth_profiles: Optional[ProfileSource] = None,
    settings: Any = None,
    clock: Optional[Callable[[], float]] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services around any set of sources (MySQL in production, fakes in tests)."""
    rules = AttendanceRules(
        punch_in_deadline=_setting(settings, "PUNCH_IN_DEADLINE", constants.DEFAULT_PUNCH_IN_DEADLINE),
        punch_out_minimum=_setting(settings, "PUNCH_OUT_MINIMUM", constants.DEFAULT_PUNCH_OUT_MINIMUM),
        reopen_time=_setting(settings, "PUNCH_REOPEN_TIME", constants.DEFAULT_PUNCH_REOPEN_TIME),
    )
    week_starts_on = int(_setting(settings, "WEEK_STARTS_ON", constants.DEFAULT_WEEK_STARTS_ON))
    cache = ResultCache(
        float(_setting(settings, "CACHE_TTL_SECONDS", constants.DEFAULT_CACHE_TTL_SECONDS)),
        clock=clock,
    )

    attendance_service = AttendanceService(
        records,
        classifier=AttendanceClassifier(rules),
        gate=PunchGate(rules),
        week_starts_on=week_starts_on,
    )
    target_resolver = TargetResolver(targets)
    achievement_aggregator = AchievementAggregator(records, target_resolver, week_starts_on=week_starts_on)
    leaderboard_ranker = LeaderboardRanker(records, ProfileResolver(profiles, auth_profiles))

    engine = PerformanceEngine(
        attendance=attendance_service,
        aggregator=achievement_aggregator,
        targets=target_resolver,
        leaderboard=leaderboard_ranker,
        cache=cache,
        week_starts_on=week_starts_on,
    )

    return Container(
        conn=conn,
        records_source=records,
        target_source=targets,
        profile_source=profiles,
        cache=cache,
        attendance_service=attendance_service,
        target_resolver=target_resolver,
        achievement_aggregator=achievement_aggregator,
        leaderboard_ranker=leaderboard_ranker,
        engine=engine,
    )


def build_container(*, db_config: dict, settings: Any = None) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection(config)

    return assemble(
        records=MySQLRecordSource(conn),
        targets=MySQLTargetSource(conn),
        profiles=MySQLProfileSource(conn, table="users"),
        auth_profiles=MySQLProfileSource(conn, table="auth_profiles"),
        settings=settings,
        conn=conn,
    )
