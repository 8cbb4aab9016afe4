import os, sys
import tempfile
import pytest
from fastapi.testclient import TestClient

# Ensure backend/ is first on sys.path so the local package wins over an installed copy
backend_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if backend_root not in sys.path:
    sys.path.insert(0, backend_root)

# Tests get their own SQLite file instead of ./local.db
_db_dir = tempfile.mkdtemp(prefix="calendar-picker-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite+pysqlite:///{os.path.join(_db_dir, 'test.db')}")

from calendar_picker.main import app  # noqa: E402
from calendar_picker.db.session import engine, Base  # noqa: E402
from calendar_picker.adapters.token_storage import create_access_token  # noqa: E402


@pytest.fixture(scope="function")  # fresh DB per test
def client():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    return TestClient(app)


@pytest.fixture
def auth_headers():
    token = create_access_token("1", modules=["calendar"], username="editor")
    return {"Authorization": f"Bearer {token}"}
