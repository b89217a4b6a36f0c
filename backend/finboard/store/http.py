from __future__ import annotations

import httpx

from finboard.store.base import RecordStore, StoreError


class HttpRecordStore(RecordStore):
    """Client for the hosted record-storage REST endpoint.

    Requests are ``POST {base_url}/{collection}/{operation}`` with the query or
    batch params as the JSON body; the decoded body is the envelope.
    """

    def __init__(self, client: httpx.Client):
        self.client = client

    @classmethod
    def from_settings(cls, settings) -> "HttpRecordStore":
        headers = {}
        if settings.record_store_project_id:
            headers["X-Project-Id"] = settings.record_store_project_id
        if settings.record_store_public_key:
            headers["X-Public-Key"] = settings.record_store_public_key
        client = httpx.Client(
            base_url=settings.record_store_url.rstrip("/"),
            headers=headers,
            timeout=settings.record_store_timeout_seconds,
        )
        return cls(client)

    def _call(self, collection: str, operation: str, body: dict) -> dict:
        try:
            r = self.client.post(f"/{collection}/{operation}", json=body)
            r.raise_for_status()
            out = r.json()
        except httpx.HTTPStatusError as e:
            raise StoreError(f"{operation} {collection}: HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise StoreError(f"{operation} {collection}: {e}") from e
        except ValueError as e:
            raise StoreError(f"{operation} {collection}: invalid JSON response") from e
        if not isinstance(out, dict):
            raise StoreError(f"{operation} {collection}: unexpected response shape")
        return out

    def fetch_records(self, collection: str, params: dict) -> dict:
        return self._call(collection, "fetch", params)

    def get_record_by_id(self, collection: str, record_id: int, params: dict) -> dict:
        return self._call(collection, "get", {"Id": int(record_id), **params})

    def create_record(self, collection: str, params: dict) -> dict:
        return self._call(collection, "create", params)

    def update_record(self, collection: str, params: dict) -> dict:
        return self._call(collection, "update", params)

    def delete_record(self, collection: str, params: dict) -> dict:
        return self._call(collection, "delete", params)

    def close(self) -> None:
        self.client.close()
