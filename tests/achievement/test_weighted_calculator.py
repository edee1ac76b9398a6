from achievement_system.achievement.calculator.weighted_calculator import WeightedScoreCalculator, capped_percentage
from achievement_system.achievement.model import PeriodTotals
from achievement_system.targets.model import TargetConfig


def test_capped_percentage():
    assert capped_percentage(15, 30) == 50.0
    assert capped_percentage(60, 30) == 100.0
    assert capped_percentage(5, 0) == 0.0


def test_exact_targets_score_100():
    calc = WeightedScoreCalculator()
    totals = PeriodTotals(meetings_held=30, meetings_attended=30, total_duration_seconds=72000, total_closing_amount=50000)
    components = calc.component_percentages(totals, TargetConfig(owner_id="u1"))
    assert components == (100.0, 100.0, 100.0, 100.0)
    assert calc.weighted(components) == 100.0


def test_weights_blend_capped_components():
    calc = WeightedScoreCalculator()
    totals = PeriodTotals(meetings_held=60, meetings_attended=15, total_duration_seconds=0, total_closing_amount=25000)
    components = calc.component_percentages(totals, TargetConfig(owner_id="u1"))
    # 100*0.25 + 50*0.25 + 0*0.20 + 50*0.30
    assert calc.weighted(components) == 52.5


def test_zero_targets_do_not_divide():
    calc = WeightedScoreCalculator()
    totals = PeriodTotals(meetings_held=10)
    targets = TargetConfig(owner_id="u1", num_meetings=0, attended_meetings=0, duration_seconds=0, closing_amount=0)
    assert calc.weighted(calc.component_percentages(totals, targets)) == 0.0
