"""Run the auto clock-out job once, outside the web app.

For crontab deployments, e.g. ``0 * * * * python scripts/run_auto_clockout.py``.
Prints the same JSON body the HTTP trigger returns; exits non-zero on failure.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import load_settings

from src.nightbase.nightbase.common.logging_config import configure_logging
from src.nightbase.nightbase.container import build_container
from src.nightbase.nightbase.core.exceptions import StoreLoadError


def main() -> int:
    load_dotenv(override=False)
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(
        db_config=settings.DB_CONFIG,
        business_timezone=settings.BUSINESS_TIMEZONE,
        gate_mode=settings.AUTO_CLOCKOUT_GATE,
    )

    try:
        report = container.auto_clockout_service.run()
    except StoreLoadError as e:
        print(json.dumps({"success": False, "error": str(e)}, ensure_ascii=False))
        return 1

    print(json.dumps({"success": True, **report.to_dict()}, ensure_ascii=False, indent=2))
    return 0 if report.failed == 0 else 2


if __name__ == "__main__":
    raise SystemExit(main())
