from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
import threading

from ..config import DATABASE_URL

"""Database session / engine configuration.

A file-based SQLite database is used unless DATABASE_URL is provided;
in-memory SQLite would give every connection its own empty database.
"""

engine = create_engine(
    DATABASE_URL,
    echo=False,
    future=True,
)

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

class Base(DeclarativeBase):
    pass

_init_lock = threading.Lock()
_tables_created = False

def _ensure_tables():
    global _tables_created
    if _tables_created:
        return
    with _init_lock:
        if not _tables_created:
            from . import models  # noqa: F401 register models before create_all
            Base.metadata.create_all(bind=engine)
            _tables_created = True

# Dependency
def get_db():
    _ensure_tables()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
