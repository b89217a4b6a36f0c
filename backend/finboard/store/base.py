from __future__ import annotations

from abc import ABC, abstractmethod


class StoreError(Exception):
    """Raised by store clients when a request never produced a response envelope."""


class RecordStore(ABC):
    """CRUD client for a hosted record store.

    Every method takes a collection name (``transaction_c``, ``budget_c``, ...)
    and returns the store's JSON envelope:

    - fetch:  ``{"success", "data": [...], "message"}``
    - get:    ``{"success", "data": {...} | None, "message"}``
    - create / update: ``{"success", "results": [{"success", "data", "message"}], "message"}``
    - delete: ``{"success", "results": [{"success", "message"}], "message"}``

    Transport problems raise ``StoreError``; backend-side rejections come back
    as ``success: False`` envelopes.
    """

    @abstractmethod
    def fetch_records(self, collection: str, params: dict) -> dict: ...

    @abstractmethod
    def get_record_by_id(self, collection: str, record_id: int, params: dict) -> dict: ...

    @abstractmethod
    def create_record(self, collection: str, params: dict) -> dict: ...

    @abstractmethod
    def update_record(self, collection: str, params: dict) -> dict: ...

    @abstractmethod
    def delete_record(self, collection: str, params: dict) -> dict: ...

    def close(self) -> None:
        return None
