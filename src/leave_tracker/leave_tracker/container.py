from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_WINDOW_DAYS
from .database.bootstrap import apply_schema
from .database.connection import DatabaseConnection, DBConfig
from .leave.service import LeaveService
from .metrics.service import MetricsService
from .personnel.registry import PersonnelRegistry
from .storage.file_store import JsonFileKeyValueStore
from .storage.memory_store import InMemoryKeyValueStore
from .storage.mysql_store import MySQLKeyValueStore
from .storage.personnel_store import PersonnelStore
from .storage.repository import KeyValueStore


@dataclass(frozen=True)
class Container:
    kv_store: KeyValueStore
    personnel_store: PersonnelStore
    registry: PersonnelRegistry

    leave_service: LeaveService
    metrics_service: MetricsService


def build_kv_store(
    *,
    backend: str,
    data_file: Optional[str] = None,
    db_config: Optional[dict] = None,
    auto_init_db: bool = False,
) -> KeyValueStore:
    backend = (backend or "memory").strip().lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "file":
        if not data_file:
            raise ValueError("STORE_BACKEND=file requires DATA_FILE")
        return JsonFileKeyValueStore(data_file)
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        if auto_init_db:
            apply_schema(conn)
        return MySQLKeyValueStore(conn)
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")


def build_container(
    *,
    kv_store: Optional[KeyValueStore] = None,
    backend: str = "memory",
    data_file: Optional[str] = None,
    db_config: Optional[dict] = None,
    auto_init_db: bool = False,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> Container:
    kv = kv_store or build_kv_store(
        backend=backend,
        data_file=data_file,
        db_config=db_config,
        auto_init_db=auto_init_db,
    )
    personnel_store = PersonnelStore(kv)

    registry = PersonnelRegistry(personnel_store)
    registry.load()

    leave_service = LeaveService(registry)
    metrics_service = MetricsService(registry, window_days=window_days)

    return Container(
        kv_store=kv,
        personnel_store=personnel_store,
        registry=registry,
        leave_service=leave_service,
        metrics_service=metrics_service,
    )
