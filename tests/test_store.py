import threading
from datetime import datetime

from credauth.auth.store import AccountSummary, CredentialStore


def test_ids_are_sequential_from_one(store):
    a = store.create("alice", "h1")
    b = store.create("bob", "h2")
    assert (a.id, b.id) == (1, 2)
    assert isinstance(a.created_at, datetime)
    assert a.created_at.tzinfo is not None
    assert len(store) == 2


def test_find_by_username_is_exact(store):
    store.create("alice", "h1")
    assert store.find_by_username("alice").password_hash == "h1"
    assert store.find_by_username("Alice") is None
    assert store.find_by_username("alice ") is None
    assert store.find_by_username("nobody") is None


def test_create_does_not_check_uniqueness_but_lookup_returns_first(store):
    first = store.create("alice", "h1")
    second = store.create("alice", "h2")
    assert second.id == 2
    assert store.find_by_username("alice") == first


def test_create_if_absent(store):
    created = store.create_if_absent("alice", "h1")
    assert created is not None and created.id == 1
    assert store.create_if_absent("alice", "h2") is None
    assert len(store) == 1
    # the rejected attempt did not consume an id
    assert store.create_if_absent("bob", "h3").id == 2


def test_list_all_excludes_hash(store):
    store.create("alice", "secret-hash")
    store.create("bob", "other-hash")
    listing = store.list_all()
    assert [s.username for s in listing] == ["alice", "bob"]
    assert all(isinstance(s, AccountSummary) for s in listing)
    assert not any(hasattr(s, "password_hash") for s in listing)
    assert set(listing[0].to_dict()) == {"id", "username", "createdAt"}
    assert "secret-hash" not in repr(store.find_by_username("alice"))


def test_create_if_absent_single_winner_under_threads(store):
    barrier = threading.Barrier(8)
    results = []

    def worker(i):
        barrier.wait()
        results.append(store.create_if_absent("dave", f"h{i}"))

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sum(1 for r in results if r is not None) == 1
    assert len(store) == 1
