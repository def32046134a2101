"""
Kennel Report web service.

Environment:
    KENNEL_REPORT_HOST / KENNEL_REPORT_PORT   bind address (0.0.0.0:8010)
    KENNEL_REPORT_RELOAD                      1/true/yes enables auto-reload
    KENNEL_REPORT_LOG_LEVEL                   service.log level (INFO)
    KENNEL_REPORT_LOG_DIR                     log directory (<project>/logs)
"""
import logging
import os
import sys
from pathlib import Path

import uvicorn

# Add project root to path
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.logger import setup_logging


def _env_flag(name: str) -> bool:
    return os.getenv(name, "0").lower() in {"1", "true", "yes"}


def _env_log_level(name: str, default: int = logging.INFO) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise SystemExit(f"{name} must be a logging level name, got {raw!r}")
    return level


def main():
    """Serve the report API with uvicorn."""
    setup_logging(log_level=_env_log_level("KENNEL_REPORT_LOG_LEVEL"))

    reload_enabled = _env_flag("KENNEL_REPORT_RELOAD")

    uvicorn.run(
        "web.backend.app:app",
        host=os.getenv("KENNEL_REPORT_HOST", "0.0.0.0"),
        port=int(os.getenv("KENNEL_REPORT_PORT", "8010")),
        reload=reload_enabled,
        reload_dirs=["web", "core"] if reload_enabled else None,
    )


if __name__ == "__main__":
    main()
