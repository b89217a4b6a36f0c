from __future__ import annotations

import logging
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError

from finboard.services.notify import Notifier
from finboard.services.result import ErrorKind, Result
from finboard.store.base import RecordStore
from finboard.store.query import field_list

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)


def _coerce_id(record_id) -> int | None:
    try:
        return int(record_id)
    except (TypeError, ValueError):
        return None


class RecordMapper(Generic[E]):
    """Translates between one store collection and one domain entity.

    Subclasses set ``collection``, ``fields`` and ``label`` and implement the
    three translation hooks. The ``*_result`` methods report what went wrong;
    the plain methods collapse failures to ``[]`` / ``None`` / ``False`` for
    callers that only want something to render.
    """

    collection: str
    fields: tuple[str, ...]
    label: str
    default_order: list[dict] | None = None

    def __init__(self, store: RecordStore, notifier: Notifier | None = None):
        self.store = store
        self.notifier = notifier or Notifier()

    # --- translation hooks

    def to_entity(self, raw: dict) -> E:
        raise NotImplementedError

    def to_create_record(self, data) -> dict:
        raise NotImplementedError

    def to_update_record(self, data) -> dict:
        raise NotImplementedError

    # --- helpers

    def _params(self, where: list[dict] | None = None, order: list[dict] | None = None) -> dict:
        params: dict = {"fields": field_list(self.fields)}
        if where:
            params["where"] = where
        if order:
            params["orderBy"] = order
        return params

    def _backend_failure(self, action: str, response: dict, notify: bool) -> Result:
        message = response.get("message") or f"Failed to {action} {self.label}"
        logger.error("%s %s failed: %s", action, self.label, message)
        if notify:
            self.notifier.error(message)
        return Result.failure(ErrorKind.BACKEND, message)

    def _batch(self, action: str, response: dict) -> Result[list[dict]]:
        if not response.get("success"):
            return self._backend_failure(action, response, notify=True)

        results = response.get("results") or []
        successful = [r for r in results if r.get("success")]
        failed = [r for r in results if not r.get("success")]

        if failed:
            logger.error("Failed to %s %d %s: %s", action, len(failed), self.label, failed)
            for r in failed:
                if r.get("message"):
                    self.notifier.error(r["message"])

        if not successful:
            message = (failed[0].get("message") if failed else None) or f"Failed to {action} {self.label}"
            return Result.failure(ErrorKind.BACKEND, message)
        return Result.success(successful)

    # --- result API

    def fetch_result(
        self,
        where: list[dict] | None = None,
        order: list[dict] | None = None,
        notify: bool = True,
    ) -> Result[list[E]]:
        try:
            response = self.store.fetch_records(self.collection, self._params(where, order))
        except Exception as e:
            logger.exception("fetch %s failed", self.label)
            return Result.failure(ErrorKind.TRANSPORT, str(e))

        if not response.get("success"):
            return self._backend_failure("fetch", response, notify)

        try:
            return Result.success([self.to_entity(r) for r in response.get("data") or []])
        except ValidationError as e:
            logger.exception("Malformed %s record", self.label)
            return Result.failure(ErrorKind.BACKEND, str(e))

    def get_result(self, record_id) -> Result[E]:
        rid = _coerce_id(record_id)
        if rid is None:
            return Result.failure(ErrorKind.NOT_FOUND, f"invalid id: {record_id!r}")

        try:
            response = self.store.get_record_by_id(self.collection, rid, self._params())
        except Exception as e:
            logger.exception("fetch %s %s failed", self.label, rid)
            return Result.failure(ErrorKind.TRANSPORT, str(e))

        if not response.get("success"):
            return self._backend_failure("fetch", response, notify=False)

        raw = response.get("data")
        if not raw:
            return Result.failure(ErrorKind.NOT_FOUND, f"{self.label} {rid} not found")

        try:
            return Result.success(self.to_entity(raw))
        except ValidationError as e:
            logger.exception("Malformed %s record %s", self.label, rid)
            return Result.failure(ErrorKind.BACKEND, str(e))

    def first_result(self, where: list[dict]) -> Result[E]:
        found = self.fetch_result(where=where, notify=False)
        if not found.ok:
            return found
        if not found.value:
            return Result.failure(ErrorKind.NOT_FOUND, f"no matching {self.label}")
        return Result.success(found.value[0])

    def _write(self, action: str, call, params: dict) -> Result[E]:
        try:
            response = call(self.collection, params)
        except Exception as e:
            logger.exception("%s %s failed", action, self.label)
            return Result.failure(ErrorKind.TRANSPORT, str(e))

        batch = self._batch(action, response)
        if not batch.ok:
            return batch
        try:
            return Result.success(self.to_entity(batch.value[0].get("data") or {}))
        except ValidationError as e:
            logger.exception("Malformed %s record after %s", self.label, action)
            return Result.failure(ErrorKind.BACKEND, str(e))

    def create_result(self, data) -> Result[E]:
        return self._write("create", self.store.create_record, {"records": [self.to_create_record(data)]})

    def update_result(self, record_id, data) -> Result[E]:
        rid = _coerce_id(record_id)
        if rid is None:
            return Result.failure(ErrorKind.NOT_FOUND, f"invalid id: {record_id!r}")
        record = {"Id": rid, **self.to_update_record(data)}
        return self._write("update", self.store.update_record, {"records": [record]})

    def delete_result(self, record_id) -> Result[bool]:
        rid = _coerce_id(record_id)
        if rid is None:
            return Result.failure(ErrorKind.NOT_FOUND, f"invalid id: {record_id!r}")

        try:
            response = self.store.delete_record(self.collection, {"RecordIds": [rid]})
        except Exception as e:
            logger.exception("delete %s %s failed", self.label, rid)
            return Result.failure(ErrorKind.TRANSPORT, str(e))

        batch = self._batch("delete", response)
        if not batch.ok:
            return batch
        return Result.success(True)

    # --- default-on-failure API

    def get_all(self) -> list[E]:
        return self.fetch_result(order=self.default_order).get_or_else([])

    def get_by_id(self, record_id) -> E | None:
        return self.get_result(record_id).get_or_else(None)

    def create(self, data) -> E | None:
        return self.create_result(data).get_or_else(None)

    def update(self, record_id, data) -> E | None:
        return self.update_result(record_id, data).get_or_else(None)

    def delete(self, record_id) -> bool:
        return self.delete_result(record_id).get_or_else(False)
