from src.adapters.rules_port import RulesAdapter
from src.components.days import Day
from src.rules.models import CalendarRules, DeferredRules, Rules


def test_defaults_without_rules():
    adapter = RulesAdapter()
    assert adapter.get_delay_seconds() == 1.0
    assert adapter.get_min_rating() == 4
    assert adapter.get_default_to_upper() is True
    assert adapter.get_weekend_days() == frozenset({Day.SUNDAY})


def test_reads_from_rules():
    rules = Rules(
        calendar=CalendarRules(weekend_days=["saturday", "sunday"]),
        deferred=DeferredRules(delay_seconds=0.1),
    )
    adapter = RulesAdapter(rules)
    assert adapter.rules is rules
    assert adapter.get_delay_seconds() == 0.1
    assert adapter.get_weekend_days() == frozenset({Day.SATURDAY, Day.SUNDAY})
