"""Properties both persistence strategies must share."""

import pytest

from todo_app.persistence import create_persistence


@pytest.fixture(params=["pg", "session"])
def persistence(request, session_factory, registered_users):
    if request.param == "pg":
        return create_persistence({"username": "alice"}, "pg", session_factory=session_factory)
    return create_persistence({"username": "alice", "todo_lists": []}, "session")


async def _list_id(persistence, title):
    await persistence.create_todo_list(title)
    todo_lists = await persistence.sorted_todo_lists()
    return next(todo_list["id"] for todo_list in todo_lists if todo_list["title"] == title)


@pytest.mark.asyncio
async def test_new_todo_round_trip(persistence):
    todo_list_id = await _list_id(persistence, "Inbox")

    assert await persistence.create_new_todo(todo_list_id, "X") is True

    todo_list = await persistence.load_todo_list(todo_list_id)
    assert [(todo["title"], todo["done"]) for todo in todo_list["todos"]] == [("X", False)]


@pytest.mark.asyncio
async def test_toggle_twice_restores_done(persistence):
    todo_list_id = await _list_id(persistence, "Inbox")
    await persistence.create_new_todo(todo_list_id, "X")
    todo_id = (await persistence.load_todo_list(todo_list_id))["todos"][0]["id"]

    assert await persistence.toggle_done_todo(todo_list_id, todo_id) is True
    assert (await persistence.load_todo(todo_list_id, todo_id))["done"] is True
    assert await persistence.toggle_done_todo(todo_list_id, todo_id) is True
    assert (await persistence.load_todo(todo_list_id, todo_id))["done"] is False


@pytest.mark.asyncio
async def test_toggle_missing_todo(persistence):
    todo_list_id = await _list_id(persistence, "Inbox")

    assert await persistence.toggle_done_todo(todo_list_id, 987654) is False


@pytest.mark.asyncio
async def test_deleted_list_is_not_found(persistence):
    todo_list_id = await _list_id(persistence, "Temp")

    assert await persistence.delete_todo_list(todo_list_id) is True
    assert await persistence.load_todo_list(todo_list_id) is None
    assert await persistence.load_todo_list(todo_list_id) is None


@pytest.mark.asyncio
async def test_exists_after_create(persistence):
    assert await persistence.exists_todo_list_title("Fresh") is False

    await persistence.create_todo_list("Fresh")

    assert await persistence.exists_todo_list_title("Fresh") is True


@pytest.mark.asyncio
async def test_sorted_lists_invariant(persistence):
    for title, todos in [
        ("b-open", [("t1", False)]),
        ("A-done", [("t2", True)]),
        ("c-empty", []),
        ("a-open", [("t3", True), ("t4", False)]),
        ("B-done", [("t5", True), ("t6", True)]),
    ]:
        todo_list_id = await _list_id(persistence, title)
        for todo_title, done in todos:
            await persistence.create_new_todo(todo_list_id, todo_title)
        if todos and all(done for _, done in todos):
            await persistence.complete_all_todos(todo_list_id)
        elif todos:
            todo_list = await persistence.load_todo_list(todo_list_id)
            for todo in todo_list["todos"]:
                if dict(todos)[todo["title"]]:
                    await persistence.toggle_done_todo(todo_list_id, todo["id"])

    result = await persistence.sorted_todo_lists()
    flags = [persistence.is_done_todo_list(todo_list) for todo_list in result]
    split = flags.index(True)

    assert flags == [False] * split + [True] * (len(flags) - split)
    for group in (result[:split], result[split:]):
        keys = [todo_list["title"].lower() for todo_list in group]
        assert keys == sorted(keys)
    assert [todo_list["title"] for todo_list in result] == [
        "a-open", "b-open", "c-empty", "A-done", "B-done",
    ]
