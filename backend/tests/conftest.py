import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from finboard.db.base import Base
from finboard.models.record import StoreRecord  # noqa: F401
from finboard.services.notify import BufferedNotifier
from finboard.store.base import RecordStore, StoreError
from finboard.store.sql import SqlRecordStore


class ScriptedStore(RecordStore):
    """In-memory stand-in that records every call and returns canned envelopes."""

    def __init__(self):
        self.calls: list[tuple[str, str, tuple]] = []
        self.raise_on: set[str] = set()
        self.responses: dict = {}

    def _handle(self, op: str, collection: str, *args):
        self.calls.append((op, collection, args))
        if op in self.raise_on:
            raise StoreError(f"{op} exploded")
        resp = self.responses.get(op)
        if callable(resp):
            return resp(collection, *args)
        if resp is not None:
            return resp
        return self._default(op, args)

    def _default(self, op: str, args: tuple) -> dict:
        if op == "fetch":
            return {"success": True, "data": [], "message": ""}
        if op == "get":
            return {"success": True, "data": None, "message": ""}
        if op in ("create", "update"):
            params = args[-1]
            return {
                "success": True,
                "results": [
                    {"success": True, "data": {"Id": r.get("Id", i + 1), **r}, "message": ""}
                    for i, r in enumerate(params["records"])
                ],
                "message": "",
            }
        return {"success": True, "results": [{"success": True, "message": ""}], "message": ""}

    def ops(self) -> list[str]:
        return [c[0] for c in self.calls]

    def fetch_records(self, collection, params):
        return self._handle("fetch", collection, params)

    def get_record_by_id(self, collection, record_id, params):
        return self._handle("get", collection, record_id, params)

    def create_record(self, collection, params):
        return self._handle("create", collection, params)

    def update_record(self, collection, params):
        return self._handle("update", collection, params)

    def delete_record(self, collection, params):
        return self._handle("delete", collection, params)


@pytest.fixture()
def session():
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()
        engine.dispose()


@pytest.fixture()
def sql_store(session):
    return SqlRecordStore(session)


@pytest.fixture()
def scripted():
    return ScriptedStore()


@pytest.fixture()
def notifier():
    return BufferedNotifier()
