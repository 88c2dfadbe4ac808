from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.banco_horas.banco_horas.database.bootstrap import apply_sql_file
from src.banco_horas.banco_horas.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(dict(settings.DB_CONFIG)))
    cfg = conn.config

    count = apply_sql_file(conn, path=REPO_ROOT / "database" / "seed.sql")
    print(f"OK: Seeded database -> {cfg.user}@{cfg.host}:{cfg.port}/{cfg.database} ({count} statements)")


if __name__ == "__main__":
    main()
