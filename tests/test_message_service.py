from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta, timezone

import pytest

from message_board_api.app.core.exceptions import InvalidInput, MessageBoardError, NotFound
from message_board_api.app.schemas.message import VoteDirection
from message_board_api.app.services.message_service import MessageStore


def test_create_assigns_increasing_ids_from_one(store, clock):
    first = store.create("hello")
    clock.advance()
    second = store.create("world")

    assert (first.id, second.id) == (1, 2)
    assert first.text == "hello"
    assert first.upvotes == 0
    assert first.last_updated == datetime(2025, 9, 1, 10, 0, 0, tzinfo=timezone.utc)
    assert second.last_updated > first.last_updated
    assert len(store) == 2


def test_create_with_real_clock_sets_current_time():
    store = MessageStore()
    before = datetime.now(timezone.utc)
    message = store.create("hello")
    assert message.last_updated >= before.replace(microsecond=before.microsecond // 1000 * 1000)
    assert message.last_updated.microsecond % 1000 == 0
    assert message.last_updated.tzinfo is not None


def test_create_rejects_empty_text_without_consuming_an_id(store):
    with pytest.raises(InvalidInput):
        store.create("")
    assert len(store) == 0
    assert store.list_all() == []

    assert store.create("first").id == 1


def test_vote_up_and_down(store, clock):
    created = store.create("hello")

    clock.advance(5)
    up = store.vote(created.id, VoteDirection.UP)
    assert up.upvotes == 1
    assert up.last_updated == clock.now

    clock.advance(5)
    down = store.vote(created.id, VoteDirection.DOWN)
    assert down.upvotes == 0
    assert down.last_updated > up.last_updated

    assert store.vote(created.id, VoteDirection.DOWN).upvotes == -1


def test_vote_defaults_to_upvote(store):
    store.create("hello")
    assert store.vote(1).upvotes == 1


def test_timestamps_are_truncated_to_milliseconds(store, clock):
    clock.now = clock.now.replace(microsecond=123456)
    created = store.create("hello")
    assert created.last_updated.microsecond == 123000

    clock.now = clock.now.replace(microsecond=999999)
    assert store.vote(created.id).last_updated.microsecond == 999000


def test_vote_never_moves_timestamp_backwards(store, clock):
    created = store.create("hello")
    clock.now = created.last_updated - timedelta(minutes=10)

    voted = store.vote(created.id)
    assert voted.upvotes == 1
    assert voted.last_updated == created.last_updated


def test_vote_unknown_id_raises_not_found(store):
    store.create("hello")
    before = store.list_all()

    with pytest.raises(NotFound):
        store.vote(99, VoteDirection.UP)
    assert store.list_all() == before


def test_get_returns_single_message(store):
    store.create("hello")
    store.create("world")
    assert store.get(2).text == "world"
    with pytest.raises(NotFound):
        store.get(3)


def test_errors_are_value_errors():
    assert issubclass(InvalidInput, MessageBoardError)
    assert issubclass(NotFound, MessageBoardError)
    assert issubclass(MessageBoardError, ValueError)


def test_list_all_returns_snapshot_in_insertion_order(store):
    for text in ("a", "b", "c"):
        store.create(text)

    snapshot = store.list_all()
    store.vote(2)

    assert [m.text for m in snapshot] == ["a", "b", "c"]
    assert snapshot[1].upvotes == 0
    assert store.list_all()[1].upvotes == 1


def test_list_since_is_strictly_after(store, clock):
    t0 = clock.now
    store.create("first")
    t1 = clock.advance()
    store.create("second")
    clock.advance()
    store.create("third")

    assert [m.text for m in store.list_since(t1)] == ["third"]
    assert [m.text for m in store.list_since(t0)] == ["second", "third"]
    assert [m.text for m in store.list_since(t0 - timedelta(seconds=1))] == ["first", "second", "third"]
    assert store.list_since(clock.now) == []


def test_list_since_keeps_insertion_order_after_votes(store, clock):
    store.create("first")
    clock.advance()
    store.create("second")
    t = clock.advance()
    clock.advance()
    store.create("third")
    clock.advance()
    store.vote(1)

    assert [m.id for m in store.list_since(t)] == [1, 3]


def test_list_since_compares_across_offsets(store):
    store.create("hello")
    earlier_in_other_zone = datetime(2025, 9, 1, 12, 59, 59, tzinfo=timezone(timedelta(hours=3)))
    assert [m.id for m in store.list_since(earlier_in_other_zone)] == [1]


def test_list_since_rejects_naive_timestamp(store):
    with pytest.raises(InvalidInput):
        store.list_since(datetime(2025, 9, 1, 10, 0, 0))


def test_concurrent_votes_are_not_lost():
    store = MessageStore()
    message = store.create("popular")
    directions = [VoteDirection.UP] * 600 + [VoteDirection.DOWN] * 250

    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda d: store.vote(message.id, d), directions))

    assert store.get(message.id).upvotes == 600 - 250


def test_concurrent_creates_get_unique_ids():
    store = MessageStore()

    with ThreadPoolExecutor(max_workers=16) as pool:
        created = list(pool.map(lambda i: store.create(f"message {i}"), range(500)))

    assert sorted(m.id for m in created) == list(range(1, 501))
    assert [m.id for m in store.list_all()] == list(range(1, 501))


def test_vote_scenario(store):
    assert store.create("hello").id == 1
    assert store.vote(1).upvotes == 1
    assert store.vote(1, VoteDirection.DOWN).upvotes == 0
    assert store.vote(1, VoteDirection.DOWN).upvotes == -1

    listed = store.list_all()
    assert [(m.id, m.upvotes) for m in listed] == [(1, -1)]

    with pytest.raises(NotFound):
        store.vote(99)
