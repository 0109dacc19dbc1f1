"""Environment helpers behind the sheet ids, ranges and credential settings."""
import logging
import os
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


def get_config_value(key: str, default: str = "") -> str:
    """Return a stripped environment value, or ``default`` when unset or blank."""

    value = os.getenv(key, "").strip()
    return value or default


def _env_assignment(line: str) -> Optional[Tuple[str, str]]:
    text = line.strip()
    if not text or text.startswith("#") or "=" not in text:
        return None
    key, value = (part.strip() for part in text.split("=", 1))
    return (key, value.strip("\"'")) if key else None


def load_env_file(path: Path) -> None:
    """Export ``KEY=value`` lines from a sheets env file into ``os.environ``.

    A missing file is fine. Keys already exported by the shell or the host
    keep their value, and quotes around values are dropped.
    """
    if not path.exists():
        return

    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        logger.debug("Could not load env file %s: %s", path, exc)
        return

    for assignment in filter(None, map(_env_assignment, lines)):
        key, value = assignment
        os.environ.setdefault(key, value)
