from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.roll_call.roll_call.database.bootstrap import DEMO_STUDENTS, ensure_demo_users
from src.roll_call.roll_call.database.connection import DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_demo_users(db_config)
    print(
        f"OK: Seeded 1 teacher and {len(DEMO_STUDENTS)} students -> "
        f"{DBConfig.from_dict(db_config).describe()}"
    )


if __name__ == "__main__":
    main()
