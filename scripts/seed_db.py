from __future__ import annotations

import importlib
import sys
from datetime import timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.leave_tracker.leave_tracker.common.date_utils import to_iso, today_local
from src.leave_tracker.leave_tracker.container import build_container
from src.leave_tracker.leave_tracker.core.enums import LeaveType


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        backend=settings.STORE_BACKEND,
        data_file=getattr(settings, "DATA_FILE", None),
        db_config=getattr(settings, "DB_CONFIG", None),
        auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
    )
    if container.registry.all():
        raise SystemExit("Store already has personnel data; not seeding.")

    today = today_local()

    def ago(days: int) -> str:
        return to_iso(today - timedelta(days=days))

    alice = container.registry.add_person("Alice Berg", "Engineer")
    bob = container.registry.add_person("Bob Lind", "Engineer")
    carol = container.registry.add_person("Carol Ek", "Support")
    container.registry.add_person("Dan Holm", "")

    leave = container.leave_service
    leave.register_leave(alice.person_id, LeaveType.SICK, ago(40), comment="Flu")
    leave.register_return(alice.person_id, ago(36))
    leave.register_leave(alice.person_id, LeaveType.SICK, ago(2))
    leave.register_leave(bob.person_id, LeaveType.CHILD_CARE, ago(1))
    leave.register_leave(carol.person_id, LeaveType.PARENTAL, ago(10), ago(-20))

    print(f"OK: Seeded {len(container.registry.all())} people ({settings.STORE_BACKEND} store)")


if __name__ == "__main__":
    main()
