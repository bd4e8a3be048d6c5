"""Tests for the sort/partition rules."""

from todo_app.persistence.sorting import (
    has_undone_todos,
    is_done_todo_list,
    partition_todo_lists,
    sort_by_title,
    sort_todo_lists,
    sort_todos,
)


def _todo(title, done=False):
    return {"id": hash(title), "title": title, "done": done}


def _list(title, *todos):
    return {"id": hash(title), "title": title, "todos": list(todos)}


class TestDonePredicate:
    def test_empty_list_is_never_done(self):
        assert is_done_todo_list(_list("empty")) is False

    def test_all_done_is_done(self):
        assert is_done_todo_list(_list("l", _todo("a", True), _todo("b", True))) is True

    def test_one_open_todo_keeps_list_undone(self):
        assert is_done_todo_list(_list("l", _todo("a", True), _todo("b"))) is False

    def test_has_undone_todos(self):
        assert has_undone_todos(_list("l", _todo("a", True), _todo("b"))) is True
        assert has_undone_todos(_list("l", _todo("a", True))) is False
        assert has_undone_todos(_list("empty")) is False


def test_sort_by_title_ignores_case():
    items = [_todo("banana"), _todo("Apple"), _todo("cherry"), _todo("apple pie")]

    assert [item["title"] for item in sort_by_title(items)] == [
        "Apple",
        "apple pie",
        "banana",
        "cherry",
    ]


def test_sort_by_title_is_stable_for_equal_keys():
    first, second = _todo("Same"), {"id": 2, "title": "same", "done": False}

    assert sort_by_title([first, second]) == [first, second]
    assert sort_by_title([second, first]) == [second, first]


def test_sort_todos_puts_open_todos_first():
    todos = [_todo("b", True), _todo("C"), _todo("a", True), _todo("a")]

    result = sort_todos(todos)

    assert [(t["title"], t["done"]) for t in result] == [
        ("a", False),
        ("C", False),
        ("a", True),
        ("b", True),
    ]


def test_sort_todo_lists_orders_each_partition():
    undone = [_list("zeta"), _list("Alpha", _todo("x"))]
    done = [_list("omega", _todo("y", True)), _list("Beta", _todo("z", True))]

    result = sort_todo_lists(undone, done)

    assert [l["title"] for l in result] == ["Alpha", "zeta", "Beta", "omega"]


def test_partition_keeps_input_order():
    lists = [
        _list("a", _todo("x", True)),
        _list("b"),
        _list("c", _todo("y")),
        _list("d", _todo("z", True)),
    ]

    result = partition_todo_lists(lists)

    assert [l["title"] for l in result] == ["b", "c", "a", "d"]
    assert all(not is_done_todo_list(l) for l in result[:2])
    assert all(is_done_todo_list(l) for l in result[2:])
