"""Identifiers — tests for record key generation strategies."""

from datetime import datetime, timezone

from echostore.core.domain_types import IdStrategy
from echostore.core.identifiers import IdentifierFactory


def _frozen(*moments):
    it = iter(moments)
    return lambda: next(it)


def test_uuid_strategy_is_default_and_hex():
    factory = IdentifierFactory()
    record_id = factory()
    assert factory.strategy is IdStrategy.UUID
    assert len(record_id) == 32
    int(record_id, 16)


def test_uuid_ids_do_not_repeat():
    factory = IdentifierFactory(IdStrategy.UUID)
    assert len({factory() for _ in range(1000)}) == 1000


def test_timestamp_strategy_uses_seconds_precision_format():
    moment = datetime(2026, 1, 18, 12, 30, 45, 999_000, tzinfo=timezone.utc)
    factory = IdentifierFactory("timestamp", clock=_frozen(moment))
    assert factory() == "20260118123045"


def test_timestamp_same_second_gets_sequence_suffix():
    moment = datetime(2026, 1, 18, 12, 30, 45, tzinfo=timezone.utc)
    factory = IdentifierFactory(
        IdStrategy.TIMESTAMP, clock=_frozen(moment, moment, moment),
    )
    assert [factory(), factory(), factory()] == [
        "20260118123045", "20260118123045-1", "20260118123045-2",
    ]


def test_timestamp_sequence_resets_on_new_second():
    first = datetime(2026, 1, 18, 12, 30, 45, tzinfo=timezone.utc)
    second = datetime(2026, 1, 18, 12, 30, 46, tzinfo=timezone.utc)
    factory = IdentifierFactory(
        IdStrategy.TIMESTAMP, clock=_frozen(first, first, second),
    )
    assert [factory(), factory(), factory()] == [
        "20260118123045", "20260118123045-1", "20260118123046",
    ]


def test_timestamp_clock_stepping_back_never_repeats():
    at_45 = datetime(2026, 1, 18, 12, 30, 45, tzinfo=timezone.utc)
    at_46 = datetime(2026, 1, 18, 12, 30, 46, tzinfo=timezone.utc)
    factory = IdentifierFactory(
        IdStrategy.TIMESTAMP, clock=_frozen(at_45, at_46, at_45, at_46),
    )
    ids = [factory(), factory(), factory(), factory()]
    assert ids == [
        "20260118123045", "20260118123046",
        "20260118123046-1", "20260118123046-2",
    ]
    assert len(set(ids)) == 4


def test_timestamp_clock_is_read_under_the_lock():
    calls = []

    def clock():
        calls.append(factory._lock.locked())
        return datetime(2026, 1, 18, 12, 30, 45, tzinfo=timezone.utc)

    factory = IdentifierFactory(IdStrategy.TIMESTAMP, clock=clock)
    factory()
    assert calls == [True]
