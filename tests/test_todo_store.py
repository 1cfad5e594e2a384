import threading
from contextlib import nullcontext

from src.todo import TodoIdGenerator, UserStore, add_todo, list_todos, toggle_todo


def test_list_todos_empty_on_first_access():
    store = UserStore()

    assert list_todos(store, "civic_alice") == ()
    assert "civic_alice" in store


def test_get_or_create_returns_same_record():
    store = UserStore()

    first = store.get_or_create("civic_alice")
    second = store.get_or_create("civic_alice")

    assert first is second
    assert len(store) == 1


def test_add_then_list():
    store = UserStore()

    created = add_todo(store, "civic_alice", "x")
    todos = list_todos(store, "civic_alice")

    assert len(todos) == 1
    assert todos[0] is created
    assert todos[0].text == "x"
    assert todos[0].completed is False
    assert todos[0].created_at


def test_list_preserves_insertion_order_and_is_snapshot():
    store = UserStore()
    add_todo(store, "civic_alice", "first")
    add_todo(store, "civic_alice", "second")

    snapshot = list_todos(store, "civic_alice")
    add_todo(store, "civic_alice", "third")

    assert [t.text for t in snapshot] == ["first", "second"]
    assert [t.text for t in list_todos(store, "civic_alice")] == ["first", "second", "third"]


def test_toggle_twice_restores_state():
    store = UserStore()
    todo = add_todo(store, "civic_alice", "write report")

    toggled = toggle_todo(store, "civic_alice", todo.id)
    assert toggled is todo
    assert toggled.completed is True

    toggled = toggle_todo(store, "civic_alice", todo.id)
    assert toggled.completed is False


def test_toggle_unknown_id_returns_none_without_mutation():
    store = UserStore()
    todo = add_todo(store, "civic_alice", "write report")

    assert toggle_todo(store, "civic_alice", "does-not-exist") is None
    assert [(t.id, t.completed) for t in list_todos(store, "civic_alice")] == [(todo.id, False)]


def test_identities_are_isolated():
    store = UserStore()
    alice_todo = add_todo(store, "civic_alice", "alice task")
    add_todo(store, "civic_bob", "bob task")

    assert [t.text for t in list_todos(store, "civic_alice")] == ["alice task"]
    assert [t.text for t in list_todos(store, "civic_bob")] == ["bob task"]
    assert toggle_todo(store, "civic_bob", alice_todo.id) is None
    assert alice_todo.completed is False


def test_id_generator_is_strictly_increasing_within_same_millisecond():
    generator = TodoIdGenerator(clock=lambda: 1_700_000_000.0)

    ids = [int(generator.next_id()) for _ in range(5)]

    assert ids[0] == 1_700_000_000_000
    assert ids == sorted(set(ids))
    assert len(ids) == 5


def test_id_generator_follows_clock_forward():
    now = [1.0]
    generator = TodoIdGenerator(clock=lambda: now[0])

    assert generator.next_id() == "1000"
    now[0] = 2.5
    assert generator.next_id() == "2500"


def test_null_lock_factory_for_single_loop_use():
    store = UserStore(lock_factory=nullcontext)

    todo = add_todo(store, "civic_alice", "no locking")

    assert toggle_todo(store, "civic_alice", todo.id).completed is True


def test_concurrent_adds_keep_unique_ids():
    store = UserStore()

    def worker() -> None:
        for i in range(50):
            add_todo(store, "civic_alice", f"task {i}")

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    todos = list_todos(store, "civic_alice")
    assert len(todos) == 200
    assert len({t.id for t in todos}) == 200


def test_todo_to_dict_uses_wire_keys():
    store = UserStore()
    todo = add_todo(store, "civic_alice", "x")

    assert todo.to_dict() == {
        "id": todo.id,
        "text": "x",
        "completed": False,
        "createdAt": todo.created_at,
    }
