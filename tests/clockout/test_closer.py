import logging
from datetime import date

from src.nightbase.nightbase.clockout.closer import BatchCloser
from src.nightbase.nightbase.clockout.model import CutoverDecision
from src.nightbase.nightbase.core.enums import RoundingMethod
from src.nightbase.nightbase.stores.model import StoreCutoverConfig

WORK_DATE = date(2024, 6, 9)


def _decision(jst, hour=5, minute=0):
    return CutoverDecision(cutover_instant=jst(2024, 6, 10, hour, minute), target_business_date=WORK_DATE)


def test_without_rounding_clock_out_is_the_cutover(attendance_repo, make_card, jst):
    card = attendance_repo.add(make_card("tc1", "a", WORK_DATE))
    config = StoreCutoverConfig(store_id="x", time_rounding_enabled=False)

    results = BatchCloser(attendance_repo).close_all([card], _decision(jst), config)

    stored = attendance_repo.cards["tc1"]
    assert stored.clock_out == jst(2024, 6, 10, 5, 0)
    assert stored.scheduled_end_time is None
    assert stored.forgot_clockout is True
    assert len(results) == 1
    assert results[0].success
    assert (results[0].time_card_id, results[0].user_id, results[0].store_id) == ("tc1", "a", "x")
    assert results[0].work_date == WORK_DATE
    assert results[0].clock_out_time == jst(2024, 6, 10, 5, 0)


def test_rounding_only_touches_scheduled_end_time(attendance_repo, make_card, jst):
    card = attendance_repo.add(make_card("tc1", "a", WORK_DATE))
    config = StoreCutoverConfig(
        store_id="x",
        time_rounding_enabled=True,
        time_rounding_method=RoundingMethod.CEIL,
        time_rounding_minutes=15,
    )

    results = BatchCloser(attendance_repo).close_all([card], _decision(jst, 5, 10), config)

    stored = attendance_repo.cards["tc1"]
    assert stored.clock_out == jst(2024, 6, 10, 5, 10)
    assert stored.scheduled_end_time == jst(2024, 6, 10, 5, 15)
    assert results[0].clock_out_time == jst(2024, 6, 10, 5, 10)


def test_a_failing_update_does_not_stop_the_batch(attendance_repo, make_card, jst):
    cards = [attendance_repo.add(make_card(f"tc{i}", f"u{i}", WORK_DATE)) for i in range(1, 4)]
    attendance_repo.failing_ids = {"tc2"}
    config = StoreCutoverConfig(store_id="x")

    results = BatchCloser(attendance_repo).close_all(cards, _decision(jst), config)

    assert [r.success for r in results] == [True, False, True]
    assert results[1].error == "connection lost"
    assert attendance_repo.cards["tc1"].clock_out is not None
    assert attendance_repo.cards["tc2"].clock_out is None
    assert attendance_repo.cards["tc3"].clock_out is not None


def test_card_closed_in_the_meantime_is_reported(attendance_repo, make_card, jst):
    card = make_card("ghost", "a", WORK_DATE)  # never stored, so the update matches nothing

    results = BatchCloser(attendance_repo).close_all([card], _decision(jst), StoreCutoverConfig(store_id="x"))

    assert results[0].success is False
    assert results[0].error == "Time card was not updated"
    assert results[0].to_dict()["success"] is False


def test_unmatched_update_is_logged_as_error(attendance_repo, make_card, jst, caplog):
    card = make_card("ghost", "a", WORK_DATE)

    with caplog.at_level(logging.ERROR, logger="src.nightbase.nightbase.clockout.closer"):
        BatchCloser(attendance_repo).close_all([card], _decision(jst), StoreCutoverConfig(store_id="x"))

    assert any(r.levelno == logging.ERROR and "ghost" in r.getMessage() for r in caplog.records)
