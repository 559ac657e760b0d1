from datetime import date, datetime

import pytz

from src.nightbase.nightbase.stores.model import StoreCutoverConfig


def test_only_the_switch_hour_yields_a_decision(resolver, jst):
    config = StoreCutoverConfig(store_id="s1", day_switch_time="05:00:00", auto_clockout_enabled=True)

    hits = [h for h in range(24) if resolver.resolve(config, jst(2024, 3, 15, h, 0)) is not None]

    assert hits == [5]


def test_target_is_previous_day_regardless_of_minutes(resolver, jst):
    config = StoreCutoverConfig(store_id="s1", day_switch_time="05:00:00")

    decision = resolver.resolve(config, jst(2024, 3, 15, 5, 42, 17))

    assert decision is not None
    assert decision.target_business_date == date(2024, 3, 14)
    assert decision.cutover_instant == jst(2024, 3, 15, 5, 0, 0)


def test_cutover_keeps_switch_minutes(resolver, jst):
    config = StoreCutoverConfig(store_id="s1", day_switch_time="05:30:00")

    decision = resolver.resolve(config, jst(2024, 3, 15, 5, 0))

    assert decision.cutover_instant == jst(2024, 3, 15, 5, 30)


def test_malformed_switch_time_never_resolves(resolver, jst):
    config = StoreCutoverConfig(store_id="s1", day_switch_time="xx:00:00")

    assert all(resolver.resolve(config, jst(2024, 3, 15, h, 0)) is None for h in range(24))


def test_utc_now_is_converted_to_business_timezone(resolver, jst):
    config = StoreCutoverConfig(store_id="s1", day_switch_time="05:00:00")
    now = pytz.utc.localize(datetime(2024, 3, 14, 20, 0))  # 05:00 JST on the 15th

    decision = resolver.resolve(config, now)

    assert decision.target_business_date == date(2024, 3, 14)
    assert decision.cutover_instant == jst(2024, 3, 15, 5, 0)


def test_latest_ended_before_and_after_switch(resolver, jst):
    config = StoreCutoverConfig(store_id="s1", day_switch_time="05:00:00")

    before = resolver.latest_ended(config, jst(2024, 6, 10, 3, 0))
    after = resolver.latest_ended(config, jst(2024, 6, 10, 7, 0))

    assert before.target_business_date == date(2024, 6, 8)
    assert before.cutover_instant == jst(2024, 6, 9, 5, 0)
    assert after.target_business_date == date(2024, 6, 9)
    assert after.cutover_instant == jst(2024, 6, 10, 5, 0)
