import sys
from pathlib import Path

import pytest

fastapi = pytest.importorskip("fastapi")
TestClient = pytest.importorskip("fastapi.testclient").TestClient

# Allow running the tests from a checkout without installing the package.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from user_directory.app.core.storage import JSONFileStore, MemoryStore, get_store  # noqa: E402
from user_directory.app.main import create_app  # noqa: E402
from user_directory.app.schemas.user import User  # noqa: E402


@pytest.fixture
def sample_users():
    return [
        User(id=1, name="Jean Dupont", email="jean.dupont@email.com", role="admin"),
        User(id=2, name="Marie Martin", email="marie.martin@email.com", role="moderator"),
        User(id=3, name="Pierre Durand", email="pierre.durand@email.com", role="user"),
    ]


@pytest.fixture
def memory_store(sample_users):
    return MemoryStore(sample_users)


@pytest.fixture
def empty_store():
    return MemoryStore()


@pytest.fixture
def file_store(tmp_path):
    return JSONFileStore(tmp_path / "data" / "users.json")


def _make_client(store, raise_server_exceptions=True):
    """Build a test client whose record store is ``store``."""
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    return TestClient(app, raise_server_exceptions=raise_server_exceptions)


@pytest.fixture
def client_factory():
    return _make_client


@pytest.fixture
def client(memory_store):
    return _make_client(memory_store)


@pytest.fixture
def empty_client(empty_store):
    return _make_client(empty_store)
