import json

import pytest

from user_directory.app.core.errors import PersistenceError
from user_directory.app.core.storage import SEED_USERS, JSONFileStore, MemoryStore, RecordStore
from user_directory.app.schemas.user import User


def test_missing_file_is_seeded(file_store):
    assert not file_store.path.exists()

    users = file_store.read_all()

    assert [user.model_dump() for user in users] == SEED_USERS
    assert len(users) == 10
    assert file_store.path.exists()
    assert json.loads(file_store.path.read_text(encoding="utf-8")) == SEED_USERS


def test_seeded_file_is_read_back_unchanged(file_store):
    first = file_store.read_all()
    second = file_store.read_all()
    assert first == second


def test_write_then_read_round_trip(file_store, sample_users):
    file_store.write_all(sample_users)
    assert file_store.read_all() == sample_users


def test_write_is_pretty_printed(file_store, sample_users):
    file_store.write_all(sample_users)
    text = file_store.path.read_text(encoding="utf-8")
    assert text.startswith('[\n  {\n    "id": 1,')


def test_write_replaces_previous_content(file_store, sample_users):
    file_store.write_all(sample_users)
    file_store.write_all(sample_users[:1])
    assert file_store.read_all() == sample_users[:1]


def test_write_keeps_non_ascii_text(file_store):
    file_store.write_all([User(id=1, name="Zoë Modérateur", email="zoe@email.com", role="modérateur")])
    assert "Zoë Modérateur" in file_store.path.read_text(encoding="utf-8")


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        '{"id": 1, "name": "Jean"}',
        '[{"id": "abc"}]',
        "",
    ],
)
def test_malformed_file_degrades_to_empty(file_store, content, caplog):
    file_store.path.parent.mkdir(parents=True)
    file_store.path.write_text(content, encoding="utf-8")

    assert file_store.read_all() == []
    assert any(record.levelname == "WARNING" for record in caplog.records)
    # The broken file is left alone.
    assert file_store.path.read_text(encoding="utf-8") == content


def test_unreadable_path_degrades_to_empty(tmp_path):
    store = JSONFileStore(tmp_path)
    assert store.read_all() == []


@pytest.mark.parametrize("value", [None, {"id": 1}, "users"])
def test_write_rejects_non_sequences(file_store, value):
    with pytest.raises(PersistenceError):
        file_store.write_all(value)
    assert not file_store.path.exists()


def test_write_failure_raises_persistence_error(tmp_path, sample_users):
    store = JSONFileStore(tmp_path)
    with pytest.raises(PersistenceError):
        store.write_all(sample_users)


def test_next_id_of_empty_collection():
    assert RecordStore.next_id([]) == 1


def test_next_id_is_max_plus_one(sample_users):
    users = [sample_users[2], sample_users[0]]
    assert RecordStore.next_id(users) == 4


def test_next_id_reuses_freed_max():
    users = [User(id=1, name="A", email="a@x.com"), User(id=2, name="B", email="b@x.com")]
    assert RecordStore.next_id(users) == 3
    assert RecordStore.next_id(users[:1]) == 2


def test_memory_store_does_not_share_state(sample_users):
    store = MemoryStore(sample_users)

    users = store.read_all()
    users.pop()
    assert len(store.read_all()) == 3

    store.write_all(users)
    users.clear()
    assert len(store.read_all()) == 2


def test_memory_store_rejects_non_sequences():
    with pytest.raises(PersistenceError):
        MemoryStore().write_all("users")
