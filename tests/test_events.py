"""
Tests for the change notifier.
"""

import pytest

from equify.events import ALL_TABLES, ChangeEvent, ChangeType, Table, get_notifier


def favor_event(user_id="user-1", change_type=ChangeType.INSERT):
    return ChangeEvent(
        table=Table.FAVORS,
        change_type=change_type,
        user_id=user_id,
        record={"id": "fav-1", "direction": "given"},
    )


class TestChangeNotifier:
    """Test subscription and delivery."""

    def test_publish_to_table_subscriber(self, notifier):
        received = []
        notifier.subscribe(Table.FAVORS, received.append)

        delivered = notifier.publish(favor_event())

        assert delivered == 1
        assert received[0].record["id"] == "fav-1"

    def test_other_tables_not_delivered(self, notifier):
        received = []
        notifier.subscribe(Table.RELATIONSHIPS, received.append)

        assert notifier.publish(favor_event()) == 0
        assert received == []

    def test_user_filter(self, notifier):
        mine, everyone = [], []
        notifier.subscribe("favors", mine.append, user_id="user-1")
        notifier.subscribe("favors", everyone.append)

        notifier.publish(favor_event(user_id="user-2"))
        notifier.publish(favor_event(user_id="user-1"))

        assert [e.user_id for e in mine] == ["user-1"]
        assert [e.user_id for e in everyone] == ["user-2", "user-1"]

    def test_wildcard_subscription(self, notifier):
        received = []
        notifier.subscribe(ALL_TABLES, received.append)

        notifier.publish(favor_event())
        notifier.publish(ChangeEvent(table=Table.ACTIVITY_FEED, change_type=ChangeType.INSERT))

        assert [e.table for e in received] == [Table.FAVORS, Table.ACTIVITY_FEED]

    def test_unsubscribe(self, notifier):
        received = []
        subscription = notifier.subscribe(Table.FAVORS, received.append)

        assert notifier.unsubscribe(subscription) is True
        assert notifier.unsubscribe(subscription) is False
        notifier.publish(favor_event())

        assert received == []
        assert notifier.subscriber_count() == 0

    def test_failing_subscriber_isolated(self, notifier):
        received = []

        def broken(event):
            raise RuntimeError("subscriber down")

        notifier.subscribe(Table.FAVORS, broken)
        notifier.subscribe(Table.FAVORS, received.append)

        delivered = notifier.publish(favor_event())

        assert delivered == 1
        assert len(received) == 1

    def test_unknown_table_rejected(self, notifier):
        with pytest.raises(ValueError):
            notifier.subscribe("gifts", lambda event: None)

    def test_subscriber_count_per_table(self, notifier):
        notifier.subscribe(Table.FAVORS, lambda event: None)
        notifier.subscribe(Table.FAVORS, lambda event: None)
        notifier.subscribe(Table.RELATIONSHIPS, lambda event: None)

        assert notifier.subscriber_count() == 3
        assert notifier.subscriber_count(Table.FAVORS) == 2

    def test_global_notifier(self):
        assert get_notifier() is get_notifier()


class TestChangeEvent:
    """Test event model helpers."""

    def test_summary(self):
        summary = favor_event(change_type=ChangeType.DELETE).summary()

        assert summary == "DELETE favors user=user-1 id=fav-1"

    def test_timestamp_is_aware(self):
        assert favor_event().timestamp.tzinfo is not None
