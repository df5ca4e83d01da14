from typing import Callable

from loguru import logger

from agenda.config import AppConfig, StoreBackend
from agenda.schedule.service import ScheduleService
from agenda.store.adapters.http import HttpAppointmentStore
from agenda.store.adapters.memory import InMemoryAppointmentStore
from agenda.store.ports import AbstractAppointmentStore


def _build_http(config: AppConfig) -> AbstractAppointmentStore:
    return HttpAppointmentStore(
        api_url=config.backend.api_url,
        token=config.backend.token,
        timeout=config.backend.timeout,
    )


def _build_memory(config: AppConfig) -> AbstractAppointmentStore:
    return InMemoryAppointmentStore.seeded()


_BUILDERS: dict[StoreBackend, Callable[[AppConfig], AbstractAppointmentStore]] = {
    StoreBackend.HTTP: _build_http,
    StoreBackend.MEMORY: _build_memory,
}


def build_store(config: AppConfig) -> AbstractAppointmentStore:
    """Build the appointment store named by config."""
    adapter = config.backend.adapter
    logger.info("Building appointment store with adapter: {}", adapter.value)
    return _BUILDERS[adapter](config)


async def select_store(config: AppConfig) -> AbstractAppointmentStore:
    """Choose the store once at startup, falling back to memory if the backend is down."""
    store = build_store(config)
    if config.backend.adapter is StoreBackend.MEMORY or not config.backend.fallback_to_memory:
        return store

    if await store.health_check():
        return store

    logger.warning(
        "Appointment backend at {} is unreachable; using in-memory sample store",
        config.backend.api_url,
    )
    await store.close()
    return _build_memory(config)


async def build_schedule_service(config: AppConfig) -> ScheduleService:
    """Select the store and wire it into a ``ScheduleService``."""
    store = await select_store(config)
    return ScheduleService(
        store,
        clinic_timezone=config.clinic_timezone,
        strict_transitions=config.strict_transitions,
    )
