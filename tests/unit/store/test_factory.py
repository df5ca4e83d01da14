import pytest
from pytest_httpx import HTTPXMock

from agenda.config import AppConfig, BackendConfig, StoreBackend
from agenda.schedule.service import ScheduleService
from agenda.store.adapters.http import HttpAppointmentStore
from agenda.store.adapters.memory import InMemoryAppointmentStore
from agenda.store.factory import build_schedule_service, build_store, select_store

API_URL = "https://clinic.test/api"


def _config(adapter: StoreBackend, *, fallback: bool = True) -> AppConfig:
    return AppConfig(
        backend=BackendConfig(adapter=adapter, api_url=API_URL, fallback_to_memory=fallback)
    )


class TestBuildStore:
    def test_memory_adapter_is_seeded(self) -> None:
        store = build_store(_config(StoreBackend.MEMORY))

        assert isinstance(store, InMemoryAppointmentStore)

    @pytest.mark.asyncio
    async def test_http_adapter(self) -> None:
        store = build_store(_config(StoreBackend.HTTP))

        assert isinstance(store, HttpAppointmentStore)
        await store.close()


class TestSelectStore:
    @pytest.mark.asyncio
    async def test_memory_needs_no_health_check(self) -> None:
        store = await select_store(_config(StoreBackend.MEMORY))

        assert len(await store.get_all()) == 2

    @pytest.mark.asyncio
    async def test_keeps_http_store_when_backend_is_healthy(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{API_URL}/health", json={"status": "ok"})

        store = await select_store(_config(StoreBackend.HTTP))

        assert isinstance(store, HttpAppointmentStore)
        await store.close()

    @pytest.mark.asyncio
    async def test_falls_back_to_memory_when_backend_is_down(self, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=f"{API_URL}/health", status_code=503)

        store = await select_store(_config(StoreBackend.HTTP))

        assert isinstance(store, InMemoryAppointmentStore)
        assert [a.appointment_id for a in await store.get_all()] == ["1", "2"]

    @pytest.mark.asyncio
    async def test_no_fallback_skips_health_check(self) -> None:
        store = await select_store(_config(StoreBackend.HTTP, fallback=False))

        assert isinstance(store, HttpAppointmentStore)
        await store.close()


class TestBuildScheduleService:
    @pytest.mark.asyncio
    async def test_wires_selected_store(self) -> None:
        service = await build_schedule_service(_config(StoreBackend.MEMORY))

        assert isinstance(service, ScheduleService)
        view = await service.view("scheduled")
        assert len(view.rows) == 2
