"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the registry, ledger and services.
"""

from src.leave_tracker.leave_tracker.container import build_container
from src.leave_tracker.leave_tracker.core.exceptions import ConflictError


def main():
    container = build_container(backend="memory")

    alice = container.registry.add_person("Alice", "Engineer")
    container.leave_service.register_leave(alice.person_id, "sick", "2024-03-01")
    try:
        container.leave_service.register_leave(alice.person_id, "vab", "2024-03-02")
    except ConflictError as e:
        print("conflict:", e)

    record = container.leave_service.register_return(alice.person_id, "2024-03-05")
    print(record, "->", record.duration_days("2024-03-05"), "days")
    print(container.metrics_service.leave_counts().as_dict())


if __name__ == "__main__":
    main()
