from __future__ import annotations

from pathlib import Path

import pytest

from interviewengine.adapters import CandidateStore, DurableStore, InMemoryStore, SQLiteStore
from interviewengine.schemas import Candidate


@pytest.fixture(params=["memory", "sqlite"])
def durable_store(request: pytest.FixtureRequest, tmp_path: Path) -> DurableStore:
    if request.param == "memory":
        return InMemoryStore()
    return SQLiteStore(tmp_path / "store" / "kv.db")


def build_candidate(candidate_id: str = "abc12345", **kwargs) -> Candidate:
    defaults = {
        "id": candidate_id,
        "name": "Jane Doe",
        "email": "jane@gmail.com",
        "phone": "9876543210",
        "answers": ["a1"],
    }
    defaults.update(kwargs)
    return Candidate(**defaults)


def test_store_satisfies_protocol(durable_store: DurableStore) -> None:
    assert isinstance(durable_store, DurableStore)


def test_get_set_list(durable_store: DurableStore) -> None:
    assert durable_store.get("missing") is None

    durable_store.set("candidate:1", {"id": "1"})
    durable_store.set("other:1", {"id": "x"})
    durable_store.set("candidate:2", {"id": "2"})

    assert durable_store.get("candidate:1") == {"id": "1"}
    assert durable_store.list("candidate:") == [{"id": "1"}, {"id": "2"}]
    assert len(durable_store.list("")) == 3


def test_set_overwrites_and_keeps_first_write_order(durable_store: DurableStore) -> None:
    durable_store.set("candidate:1", {"v": 1})
    durable_store.set("candidate:2", {"v": 2})
    durable_store.set("candidate:1", {"v": 3})

    assert durable_store.list("candidate:") == [{"v": 3}, {"v": 2}]


def test_persist_twice_yields_one_record(durable_store: DurableStore) -> None:
    store = CandidateStore(durable_store)
    candidate = build_candidate()

    store.persist(candidate)
    store.persist(candidate)

    records = store.list_all()
    assert records == [candidate]
    assert durable_store.list("candidate:") == [candidate.model_dump(mode="json")]


def test_persist_is_last_write_wins(durable_store: DurableStore) -> None:
    store = CandidateStore(durable_store)
    candidate = build_candidate()
    store.persist(candidate)

    candidate.answers.extend(["a2", "a3"])
    candidate.score = 64
    candidate.summary = "done"
    store.persist(candidate)

    stored = store.get(candidate.id)
    assert stored is not None
    assert stored.answers == ["a1", "a2", "a3"]
    assert stored.score == 64
    assert len(store.list_all()) == 1


def test_stored_snapshot_is_detached_from_live_record(durable_store: DurableStore) -> None:
    store = CandidateStore(durable_store)
    candidate = build_candidate()
    store.persist(candidate)

    candidate.answers.append("unsaved")

    assert store.get(candidate.id).answers == ["a1"]


def test_list_all_skips_invalid_records(durable_store: DurableStore) -> None:
    store = CandidateStore(durable_store)
    store.persist(build_candidate("good"))
    durable_store.set("candidate:bad", {"id": "bad", "score": 900})

    assert [c.id for c in store.list_all()] == ["good"]


def test_sqlite_store_survives_reopen(tmp_path: Path) -> None:
    path = tmp_path / "candidates.db"
    CandidateStore(SQLiteStore(path)).persist(build_candidate(score=70, summary="ok"))

    reopened = CandidateStore(SQLiteStore(path))

    assert [c.score for c in reopened.list_all()] == [70]
