"""
Tests for the waitlist grouping fold.

Verifies that group_waitlist_rows:
- Groups in first-seen order and keeps input order within a group
- Partitions valid rows exactly (sum of totalCount == valid rows)
- Keeps totalCount equal to the waitlist length
- Skips malformed rows without raising
- Passes duplicates through untouched
"""

from admin_dashboard.services.aggregation.grouping import group_waitlist_rows

EVENT_A = {"id": "event-a", "name": "A", "capacity": 10, "reserved": 0, "start_time_date": None, "venue": None}
EVENT_B = {"id": "event-b", "name": "B", "capacity": 20, "reserved": 5, "start_time_date": None, "venue": "Hall"}


def _row(entry_id, position, event, event_id=None):
    if event_id is None:
        related = event[0] if isinstance(event, list) and event else event
        event_id = (related or {}).get("id")
    return {
        "id": entry_id,
        "email": f"{entry_id}@example.com",
        "referral": None,
        "position": position,
        "created_at": None,
        "event_id": event_id,
        "events": event,
    }


class TestGroupWaitlistRows:

    def test_empty_input(self):
        assert group_waitlist_rows([]) == []

    def test_pre_sorted_rows_form_ordered_groups(self):
        """event desc, position asc: B sorts before A."""
        rows = [
            _row("b1", 1, EVENT_B),
            _row("a1", 1, EVENT_A),
            _row("a2", 2, EVENT_A),
        ]

        groups = group_waitlist_rows(rows)

        assert [g.event.id for g in groups] == ["event-b", "event-a"]
        assert groups[0].total_count == 1
        assert groups[1].total_count == 2
        assert [e.position for e in groups[1].waitlist] == [1, 2]

    def test_input_order_is_kept_within_group(self):
        rows = [_row("a2", 2, EVENT_A), _row("a1", 1, EVENT_A)]

        groups = group_waitlist_rows(rows)

        assert [e.id for e in groups[0].waitlist] == ["a2", "a1"]

    def test_interleaved_rows_use_first_seen_group_order(self):
        rows = [
            _row("a1", 1, EVENT_A),
            _row("b1", 1, EVENT_B),
            _row("a2", 2, EVENT_A),
        ]

        groups = group_waitlist_rows(rows)

        assert [g.event.id for g in groups] == ["event-a", "event-b"]
        assert [e.id for e in groups[0].waitlist] == ["a1", "a2"]

    def test_groups_partition_valid_rows(self):
        rows = [
            _row("a1", 1, EVENT_A),
            _row("x1", 1, None, event_id="event-x"),  # relation missing
            _row("n1", 1, [], event_id=""),           # no event id
            _row("a2", 2, [EVENT_A]),
            _row("b1", 1, EVENT_B),
        ]

        groups = group_waitlist_rows(rows)

        grouped_ids = [e.id for g in groups for e in g.waitlist]
        assert sorted(grouped_ids) == ["a1", "a2", "b1"]
        assert sum(g.total_count for g in groups) == 3
        # The list-shaped relation lands in the same group as the mapping one
        assert [e.id for e in groups[0].waitlist] == ["a1", "a2"]
        for group in groups:
            assert group.total_count == len(group.waitlist)

    def test_duplicates_pass_through(self):
        rows = [_row("a1", 1, EVENT_A), _row("a1", 1, EVENT_A)]

        groups = group_waitlist_rows(rows)

        assert groups[0].total_count == 2
        assert [e.id for e in groups[0].waitlist] == ["a1", "a1"]

    def test_first_row_fixes_event_summary(self):
        renamed = {**EVENT_A, "name": "Renamed"}
        rows = [_row("a1", 1, EVENT_A), _row("a2", 2, renamed)]

        groups = group_waitlist_rows(rows)

        assert groups[0].event.name == "A"

    def test_deterministic(self):
        rows = [
            _row("b1", 1, EVENT_B),
            _row("a1", 1, EVENT_A),
            _row("b2", 2, EVENT_B),
        ]

        assert group_waitlist_rows(rows) == group_waitlist_rows(rows)

    def test_accepts_a_generator(self):
        groups = group_waitlist_rows(_row(f"a{i}", i, EVENT_A) for i in range(1, 4))

        assert groups[0].total_count == 3
