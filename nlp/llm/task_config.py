from __future__ import annotations

from typing import Any, Dict

TASK_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "beautify": {"temperature": 0.2},
}
