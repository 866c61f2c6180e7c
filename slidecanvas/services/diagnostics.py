"""
Advisory diagnostics collected during a scene build.

Diagnostics are never raised; they are logged as they are recorded and
kept on the builder so callers can inspect what was skipped or replaced.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, Any, List, Literal, Optional

logger = logging.getLogger(__name__)

UNKNOWN_COMPONENT_TYPE = "unknown_component_type"
EMPTY_TABLE = "empty_table"
IMAGE_RESOLUTION_FAILED = "image_resolution_failed"
COMPONENT_FAILED = "component_failed"


@dataclass(frozen=True)
class Diagnostic:
    level: Literal["info", "warning"]
    code: str
    message: str
    slide_index: Optional[int] = None
    component_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Diagnostics:
    """Ordered collection of diagnostics for one build"""

    def __init__(self):
        self._items: List[Diagnostic] = []

    def info(self, code: str, message: str, slide_index: Optional[int] = None, component_id: Optional[str] = None) -> Diagnostic:
        diagnostic = Diagnostic("info", code, message, slide_index, component_id)
        self._items.append(diagnostic)
        logger.info(f"[{code}] {message}")
        return diagnostic

    def warn(self, code: str, message: str, slide_index: Optional[int] = None, component_id: Optional[str] = None) -> Diagnostic:
        diagnostic = Diagnostic("warning", code, message, slide_index, component_id)
        self._items.append(diagnostic)
        logger.warning(f"[{code}] {message}")
        return diagnostic

    def by_code(self, code: str) -> List[Diagnostic]:
        return [d for d in self._items if d.code == code]

    def clear(self) -> None:
        self._items = []

    def to_list(self) -> List[Dict[str, Any]]:
        return [d.to_dict() for d in self._items]

    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
