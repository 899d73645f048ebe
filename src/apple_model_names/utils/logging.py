from __future__ import annotations

import json
import logging
import sys
from typing import Any


def setup_logging(level: int | str = logging.INFO) -> None:
    # Minimal logger: one stdout handler, message-only (messages are JSON lines).
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def log_json(event: str, *, level: int = logging.INFO, **fields: Any) -> None:
    rec: dict[str, Any] = {"event": event, **fields}
    logging.getLogger("apple_model_names").log(level, json.dumps(rec, ensure_ascii=False, default=str))
