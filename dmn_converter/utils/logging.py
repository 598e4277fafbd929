"""
Structured logging for the converter.

- Configurable level (DEBUG, INFO, WARNING, ERROR)
- Writes to a log directory (file handler) plus an optional console handler
- Helpers for conversion steps and conversion results
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

# Default: project root / logs
LOG_DIR = Path(__file__).resolve().parent.parent.parent / "logs"
LOG_LEVEL = os.getenv("DMN_CONVERTER_LOG_LEVEL", "INFO").upper()


def _ensure_log_dir(log_dir: Path) -> Path:
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def configure_logging(
    level: str = LOG_LEVEL,
    log_dir: Optional[Path] = None,
    log_to_console: bool = True,
) -> None:
    """Configure root and converter loggers. Call once at host startup."""
    log_dir = _ensure_log_dir(Path(log_dir or LOG_DIR))
    level_value = getattr(logging, level.upper(), logging.INFO)

    file_handler = logging.FileHandler(log_dir / "dmn_converter.log", encoding="utf-8")
    file_handler.setLevel(level_value)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    )

    root = logging.getLogger()
    root.setLevel(level_value)
    # Avoid duplicate handlers when reconfiguring
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    root.addHandler(file_handler)
    if log_to_console:
        console = logging.StreamHandler(sys.stdout)
        console.setLevel(level_value)
        console.setFormatter(logging.Formatter("%(levelname)s | %(name)s | %(message)s"))
        root.addHandler(console)

    logging.getLogger("dmn_converter").setLevel(level_value)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module (e.g. dmn_converter.services.converter_service)."""
    return logging.getLogger(name)


def log_conversion_step(
    logger: logging.Logger,
    step: str,
    model_key: str,
    duration_sec: Optional[float] = None,
    success: bool = True,
    error: Optional[str] = None,
    extra: Optional[dict[str, Any]] = None,
) -> None:
    """Log a conversion step (e.g. build_clauses, correlate_rules, infer_types)."""
    payload = {
        "event": "conversion_step",
        "step": step,
        "model_key": model_key,
        "duration_sec": duration_sec,
        "success": success,
        "error": error,
        "ts": _now(),
    }
    if extra:
        payload.update(extra)
    if success:
        logger.debug("Conversion: %s", json.dumps(payload, default=str))
    else:
        logger.warning("Conversion: %s", json.dumps(payload, default=str))


def log_conversion_result(
    logger: logging.Logger,
    definition_id: str,
    inputs: int,
    outputs: int,
    rules: int,
    issues: int,
    duration_sec: Optional[float] = None,
) -> None:
    """Log the outcome of a full conversion."""
    payload = {
        "event": "conversion",
        "definition_id": definition_id,
        "inputs": inputs,
        "outputs": outputs,
        "rules": rules,
        "issues": issues,
        "duration_sec": duration_sec,
        "ts": _now(),
    }
    level = logging.WARNING if issues else logging.INFO
    logger.log(level, "Conversion: %s", json.dumps(payload, default=str))
