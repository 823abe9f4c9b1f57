import threading

import pytest

from shoplists.domain.lists import ListNotFoundError, ShoppingList, ShoppingListPatch
from shoplists.infrastructure.repositories import InMemoryListRepository


@pytest.fixture()
def repo() -> InMemoryListRepository:
    return InMemoryListRepository()


def test_list_all_keeps_insertion_order(repo: InMemoryListRepository) -> None:
    repo.create(ShoppingList(id=2, name="b"))
    repo.create(ShoppingList(id=1, name="a"))
    assert [lst.id for lst in repo.list_all()] == [2, 1]


def test_duplicate_ids_resolve_to_first_match(repo: InMemoryListRepository) -> None:
    repo.create(ShoppingList(id=1, name="first"))
    repo.create(ShoppingList(id=1, name="second"))

    assert repo.get(1).name == "first"

    repo.patch(1, ShoppingListPatch(name="renamed"))
    assert [lst.name for lst in repo.list_all()] == ["renamed", "second"]

    repo.delete(1)
    assert repo.get(1).name == "second"


def test_get_missing_raises_not_found(repo: InMemoryListRepository) -> None:
    with pytest.raises(ListNotFoundError):
        repo.get(42)


def test_replace_overwrites_all_fields_including_id(repo: InMemoryListRepository) -> None:
    repo.create(ShoppingList(id=1, name="old", items=["x"]))

    updated = repo.replace(1, ShoppingList(id=7, name="new", items=[]))

    assert updated == ShoppingList(id=7, name="new", items=[])
    assert not repo.exists(1)
    assert repo.get(7).name == "new"


def test_push_appends_and_missing_id_leaves_store_untouched(
    repo: InMemoryListRepository,
) -> None:
    repo.create(ShoppingList(id=1, name="Groceries", items=["eggs"]))

    assert repo.push(1, "milk").items == ["eggs", "milk"]

    before = repo.list_all()
    with pytest.raises(ListNotFoundError):
        repo.push(2, "bread")
    assert repo.list_all() == before


def test_delete_preserves_order_of_remaining(repo: InMemoryListRepository) -> None:
    for list_id in (1, 2, 3):
        repo.create(ShoppingList(id=list_id, name=str(list_id)))

    repo.delete(2)

    assert [lst.id for lst in repo.list_all()] == [1, 3]
    with pytest.raises(ListNotFoundError):
        repo.delete(2)


def test_returned_values_are_detached(repo: InMemoryListRepository) -> None:
    created = repo.create(ShoppingList(id=1, name="Groceries", items=["eggs"]))
    created.items.append("leak")
    repo.get(1).items.append("leak")

    assert repo.get(1).items == ["eggs"]


def test_count(repo: InMemoryListRepository) -> None:
    assert repo.count() == 0
    repo.create(ShoppingList(id=1, name="a"))
    assert repo.count() == 1


def test_concurrent_pushes_are_all_kept() -> None:
    lock = threading.RLock()
    repo = InMemoryListRepository(lock=lock)
    repo.create(ShoppingList(id=1, name="Groceries"))
    workers, per_worker = 8, 50
    barrier = threading.Barrier(workers)

    def push_many(worker: int) -> None:
        barrier.wait()
        for n in range(per_worker):
            repo.push(1, f"{worker}-{n}")

    threads = [threading.Thread(target=push_many, args=(w,)) for w in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    items = repo.get(1).items
    assert len(items) == workers * per_worker
    assert len(set(items)) == workers * per_worker
