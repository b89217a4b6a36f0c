from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from finboard.models.record import StoreRecord
from finboard.store.base import RecordStore, StoreError
from finboard.store.query import matches, project, requested_fields, sort_records


def _as_dict(row: StoreRecord) -> dict:
    out = dict(row.data or {})
    out["Id"] = row.id
    out["CreatedOn"] = row.created_on.isoformat() if row.created_on is not None else None
    return out


def _payload(record: dict) -> dict:
    return {k: v for k, v in record.items() if k not in ("Id", "CreatedOn")}


class SqlRecordStore(RecordStore):
    """Record store kept in a single SQL table, one JSON payload per record.

    Filtering and ordering are evaluated in Python over the collection, which
    is fine for a single user's dashboard data.
    """

    def __init__(self, s: Session):
        self.s = s

    def _row(self, collection: str, record_id) -> StoreRecord | None:
        try:
            rid = int(record_id)
        except (TypeError, ValueError):
            return None
        row = self.s.get(StoreRecord, rid)
        if row is None or row.collection != collection:
            return None
        return row

    def fetch_records(self, collection: str, params: dict) -> dict:
        try:
            rows = (
                self.s.execute(
                    select(StoreRecord).where(StoreRecord.collection == collection).order_by(StoreRecord.id.asc())
                )
                .scalars()
                .all()
            )
        except SQLAlchemyError as e:
            raise StoreError(f"fetch {collection} failed") from e

        where = params.get("where")
        fields = requested_fields(params)
        try:
            found = [r for r in (_as_dict(x) for x in rows) if matches(r, where)]
        except ValueError as e:
            return {"success": False, "data": [], "message": str(e)}
        found = sort_records(found, params.get("orderBy"))
        return {"success": True, "data": [project(r, fields) for r in found], "message": ""}

    def get_record_by_id(self, collection: str, record_id: int, params: dict) -> dict:
        try:
            row = self._row(collection, record_id)
        except SQLAlchemyError as e:
            raise StoreError(f"get {collection}/{record_id} failed") from e
        if row is None:
            return {"success": True, "data": None, "message": ""}
        return {"success": True, "data": project(_as_dict(row), requested_fields(params)), "message": ""}

    def create_record(self, collection: str, params: dict) -> dict:
        results: list[dict] = []
        try:
            rows = []
            for rec in params.get("records") or []:
                row = StoreRecord(collection=collection, data=_payload(rec))
                self.s.add(row)
                rows.append(row)
            self.s.flush()
            self.s.commit()
            for row in rows:
                self.s.refresh(row)
                results.append({"success": True, "data": _as_dict(row), "message": ""})
        except SQLAlchemyError as e:
            self.s.rollback()
            raise StoreError(f"create {collection} failed") from e
        return {"success": True, "results": results, "message": ""}

    def update_record(self, collection: str, params: dict) -> dict:
        results: list[dict] = []
        try:
            touched = []
            for rec in params.get("records") or []:
                row = self._row(collection, rec.get("Id"))
                if row is None:
                    results.append({"success": False, "data": None, "message": f"Record {rec.get('Id')} not found"})
                    continue
                # reassign so the JSON column is marked dirty
                row.data = {**(row.data or {}), **_payload(rec)}
                touched.append((len(results), row))
                results.append({"success": True, "data": None, "message": ""})
            self.s.commit()
            for i, row in touched:
                self.s.refresh(row)
                results[i]["data"] = _as_dict(row)
        except SQLAlchemyError as e:
            self.s.rollback()
            raise StoreError(f"update {collection} failed") from e
        return {"success": True, "results": results, "message": ""}

    def delete_record(self, collection: str, params: dict) -> dict:
        results: list[dict] = []
        try:
            for rid in params.get("RecordIds") or []:
                row = self._row(collection, rid)
                if row is None:
                    results.append({"success": False, "message": f"Record {rid} not found"})
                    continue
                self.s.delete(row)
                results.append({"success": True, "message": ""})
            self.s.commit()
        except SQLAlchemyError as e:
            self.s.rollback()
            raise StoreError(f"delete {collection} failed") from e
        return {"success": True, "results": results, "message": ""}
