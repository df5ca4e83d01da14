from typing import Any

import httpx
from loguru import logger

from agenda.domain.exceptions import AppointmentNotFoundError, StoreUnavailableError
from agenda.domain.models import Appointment, AppointmentPatch
from agenda.store.adapters.parsing_helpers import appointment_from_record, record_from_patch
from agenda.store.ports import AbstractAppointmentStore


class HttpAppointmentStore(AbstractAppointmentStore):
    """Appointment store backed by the clinic's REST API."""

    def __init__(
        self,
        api_url: str,
        *,
        token: str = "",
        timeout: float = 10.0,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._token: str | None = token or None
        self._client = httpx.AsyncClient(timeout=timeout)

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        *,
        appointment_id: str | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send a request, mapping 404 to not-found and everything else to unavailable."""
        url = f"{self._api_url}{path}"
        try:
            resp = await self._client.request(method, url, headers=self._headers(), json=json)
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            if exc.response.status_code == 404 and appointment_id is not None:
                raise AppointmentNotFoundError(appointment_id) from exc
            raise StoreUnavailableError(f"Appointment API request failed: {exc}") from exc
        except httpx.HTTPError as exc:
            raise StoreUnavailableError(f"Appointment API request failed: {exc}") from exc
        return resp

    def _parse_one(self, payload: Any) -> Appointment:
        try:
            return appointment_from_record(payload)
        except (KeyError, TypeError, ValueError) as exc:
            raise StoreUnavailableError(f"Malformed appointment record: {exc}") from exc

    async def get_all(self) -> list[Appointment]:
        resp = await self._request("GET", "/appointments")
        try:
            payload: Any = resp.json()
        except ValueError as exc:
            raise StoreUnavailableError(f"Appointment API returned invalid JSON: {exc}") from exc

        if isinstance(payload, dict):
            payload = payload.get("appointments")
        if not isinstance(payload, list):
            raise StoreUnavailableError("Appointment API returned an unexpected payload")

        appointments = [self._parse_one(record) for record in payload]
        logger.debug("Fetched {} appointment(s) from API", len(appointments))
        return appointments

    async def update(self, appointment_id: str, patch: AppointmentPatch) -> Appointment:
        resp = await self._request(
            "PATCH",
            f"/appointments/{appointment_id}",
            appointment_id=appointment_id,
            json=record_from_patch(patch),
        )
        try:
            payload: Any = resp.json()
        except ValueError as exc:
            raise StoreUnavailableError(f"Appointment API returned invalid JSON: {exc}") from exc
        return self._parse_one(payload)

    async def delete(self, appointment_id: str) -> None:
        await self._request(
            "DELETE", f"/appointments/{appointment_id}", appointment_id=appointment_id
        )

    async def health_check(self) -> bool:
        try:
            await self._request("GET", "/health")
            return True
        except Exception as exc:
            logger.warning("Appointment API health check failed: {}", exc)
            return False

    async def close(self) -> None:
        await self._client.aclose()
        logger.info("Appointment API client closed")
