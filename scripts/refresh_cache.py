"""Refresh the local record cache.

Note: Downloads Events (with their registrations) and Debaters from the
document store into OUTPUT_DIR, overwriting any cached copy.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from society_attendance.container import build_container
from society_attendance.core.exceptions import DomainError
from society_attendance.main import load_settings


def main() -> None:
    settings = load_settings()
    logging.basicConfig(level=settings.log_level.upper())

    try:
        build_container(settings).record_loader.retrieve(refresh=True)
    except DomainError as exc:
        raise SystemExit(f"Cache refresh failed: {exc}")
    print(f"OK: cache refreshed in {settings.output_dir.resolve()}")


if __name__ == "__main__":
    main()
