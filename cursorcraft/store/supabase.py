"""Supabase project store.

Talks to the project's PostgREST endpoint (``<url>/rest/v1/<table>``) with
``httpx.AsyncClient``.  Every request carries the anon key in both the
``apikey`` and ``Authorization`` headers, and every query is filtered by
``user_id`` so one owner never sees another's rows.

Typical usage::

    store = SupabaseProjectStore("https://xyz.supabase.co", anon_key)
    record = await store.create(ProjectRecord(name="Acme", user_id="u-1"))
    rows = await store.list("u-1")
"""

from __future__ import annotations

from typing import Any

import httpx

from cursorcraft.errors import ProjectNotFoundError, StoreError

from .base import UPDATABLE_FIELDS, ProjectRecord


class SupabaseProjectStore:
    """:class:`~cursorcraft.store.base.ProjectStore` backed by a Supabase table."""

    def __init__(
        self,
        url: str,
        api_key: str,
        table: str = "projects",
        timeout: int = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self.api_key = api_key
        self.table = table
        self.timeout = timeout
        self.transport = transport

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        """Return a fresh ``AsyncClient`` pointed at the REST endpoint."""
        return httpx.AsyncClient(
            base_url=f"{self.url}/rest/v1",
            headers={
                "apikey": self.api_key,
                "Authorization": f"Bearer {self.api_key}",
            },
            timeout=httpx.Timeout(self.timeout, connect=10.0),
            transport=self.transport,
        )

    @staticmethod
    def _owner_filter(user_id: str | None) -> str:
        """PostgREST filter for the owner column (``is.null`` for anonymous rows)."""
        return "is.null" if user_id is None else f"eq.{user_id}"

    @staticmethod
    def _to_payload(record: ProjectRecord) -> dict[str, Any]:
        """Row payload for an insert; the database assigns ``id``."""
        return record.model_dump(exclude={"id"} if not record.id else set())

    async def _request(
        self,
        method: str,
        params: dict[str, str] | None = None,
        json: Any = None,
        return_rows: bool = False,
    ) -> list[dict[str, Any]]:
        """Send one request to the table and return the decoded rows.

        Raises:
            StoreError: On connection failures, timeouts, HTTP errors, any
                other transport or URL error, or a response body that is not
                a JSON array.
        """
        headers = {"Prefer": "return=representation"} if return_rows else {}
        try:
            async with self._client() as client:
                response = await client.request(
                    method,
                    f"/{self.table}",
                    params=params,
                    json=json,
                    headers=headers,
                )
                response.raise_for_status()
                if method == "DELETE" or (method != "GET" and not return_rows):
                    return []
                data = response.json()
        except httpx.ConnectError as exc:
            raise StoreError(f"Cannot connect to Supabase at {self.url}.") from exc
        except httpx.TimeoutException as exc:
            raise StoreError(f"Request to Supabase timed out after {self.timeout}s.") from exc
        except httpx.HTTPStatusError as exc:
            raise StoreError(
                f"Supabase returned HTTP {exc.response.status_code}: {exc.response.text[:500]}"
            ) from exc
        except ValueError as exc:
            raise StoreError(f"Supabase returned a non-JSON body: {exc}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise StoreError(f"Supabase request failed: {exc}") from exc

        if not isinstance(data, list):
            raise StoreError(f"Unexpected Supabase response: {str(data)[:200]}")
        return data

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def create(self, record: ProjectRecord) -> ProjectRecord:
        rows = await self._request("POST", json=self._to_payload(record), return_rows=True)
        if not rows:
            raise StoreError("Supabase did not return the inserted project.")
        return ProjectRecord.model_validate(rows[0])

    async def get(self, project_id: str, user_id: str | None) -> ProjectRecord | None:
        rows = await self._request(
            "GET",
            params={
                "select": "*",
                "id": f"eq.{project_id}",
                "user_id": self._owner_filter(user_id),
            },
        )
        return ProjectRecord.model_validate(rows[0]) if rows else None

    async def list(self, user_id: str | None) -> list[ProjectRecord]:
        rows = await self._request(
            "GET",
            params={
                "select": "*",
                "user_id": self._owner_filter(user_id),
                "order": "created_at.desc",
            },
        )
        return [ProjectRecord.model_validate(row) for row in rows]

    async def update(
        self, project_id: str, user_id: str | None, changes: dict[str, Any]
    ) -> ProjectRecord:
        allowed = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        rows = await self._request(
            "PATCH",
            params={"id": f"eq.{project_id}", "user_id": self._owner_filter(user_id)},
            json=allowed,
            return_rows=True,
        )
        if not rows:
            raise ProjectNotFoundError(project_id)
        return ProjectRecord.model_validate(rows[0])

    async def delete(self, project_id: str, user_id: str | None) -> None:
        await self._request(
            "DELETE",
            params={"id": f"eq.{project_id}", "user_id": self._owner_filter(user_id)},
        )
