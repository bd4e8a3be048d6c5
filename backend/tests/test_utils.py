"""Tests for the id generator and the deep-copy helper."""

from todo_app.persistence.copying import deep_copy
from todo_app.persistence.ids import advance_past, next_id


class TestNextId:
    def test_ids_are_unique_and_increasing(self):
        ids = [next_id() for _ in range(50)]

        assert len(set(ids)) == 50
        assert ids == sorted(ids)

    def test_advance_past_skips_used_ids(self):
        current = next_id()
        advance_past(current + 100)

        assert next_id() == current + 101

    def test_advance_past_never_goes_backwards(self):
        current = next_id()
        advance_past(1)

        assert next_id() == current + 1


class TestDeepCopy:
    def test_nested_structures_are_independent(self):
        original = {"id": 1, "title": "list", "todos": [{"id": 2, "title": "t", "done": False}]}

        copied = deep_copy(original)
        copied["todos"][0]["done"] = True
        copied["todos"].append({"id": 3, "title": "new", "done": False})

        assert copied is not original
        assert original["todos"] == [{"id": 2, "title": "t", "done": False}]

    def test_none_passes_through(self):
        assert deep_copy(None) is None
