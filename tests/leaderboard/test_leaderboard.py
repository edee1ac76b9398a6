import asyncio
from datetime import date

from achievement_system.leaderboard.service import LeaderboardRanker, average_by_user, rank
from achievement_system.records.model import PerformanceRecord
from achievement_system.users.service import ProfileResolver


def _report(owner_id, d, pct) -> PerformanceRecord:
    return PerformanceRecord(owner_id=owner_id, report_date=d, percentage_achieved=pct)


def test_average_counts_missing_percentage_as_zero():
    averages = {u.owner_id: u for u in average_by_user([_report("a", date(2025, 1, 1), 80), _report("a", date(2025, 1, 2), None)])}
    assert averages["a"].percentage_achieved == 40.0
    assert averages["a"].report_count == 2
    assert averages["a"].latest_report_date == date(2025, 1, 2)


def test_tie_goes_to_more_recent_activity():
    rows = [
        _report("old", date(2025, 1, 1), 70),
        _report("new", date(2025, 1, 9), 70),
        _report("top", date(2024, 12, 1), 90),
    ]
    assert [u.owner_id for u in rank(average_by_user(rows))] == ["top", "new", "old"]


def test_undated_records_rank_as_oldest():
    rows = [_report("undated", None, 50), _report("dated", date(2020, 1, 1), 50)]
    assert [u.owner_id for u in rank(average_by_user(rows))] == ["dated", "undated"]


def test_top_n_enriches_profiles(records, profiles):
    records.performance = [
        _report("a", date(2025, 1, 1), 60),
        _report("b", date(2025, 1, 2), 75.0),
        _report("c", date(2025, 1, 3), 10),
    ]
    profiles.docs = {"b": {"firstName": "Bala", "lastName": "K", "avatar": "b.png"}}
    ranker = LeaderboardRanker(records, ProfileResolver(profiles))

    entries = asyncio.run(ranker.top_n(2))

    assert [(e.rank, e.owner_id, e.name) for e in entries] == [(1, "b", "Bala K"), (2, "a", "Unknown User")]
    assert entries[0].profile_image == "b.png"
    assert entries[0].percentage_achieved == 75.0
    assert entries[0].as_dict()["user_id"] == "b"


def test_top_n_with_non_positive_n(records, profiles):
    assert asyncio.run(LeaderboardRanker(records, ProfileResolver(profiles)).top_n(0)) == []
