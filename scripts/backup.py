"""Backup personnel data.

Note: Copies the stored JSON document as-is, whichever backend is configured.
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.leave_tracker.leave_tracker.container import build_kv_store
from src.leave_tracker.leave_tracker.core.constants import STORAGE_KEY


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    kv = build_kv_store(
        backend=settings.STORE_BACKEND,
        data_file=getattr(settings, "DATA_FILE", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )

    raw = kv.get(STORAGE_KEY)
    if raw is None:
        raise SystemExit("Nothing stored yet.")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"personnel_{ts}.json"
    out_file.write_text(raw, encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
