"""
Exception hierarchy for scene building.

None of these are fatal to a whole build. Component-level errors are
caught by the dispatcher and turned into diagnostics.
"""

from typing import Optional, Dict, Any


class SceneBuildError(Exception):
    """Base exception for all scene building errors"""

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.cause = cause
        self.context = context or {}

    def __str__(self):
        parts = [super().__str__()]
        if self.cause:
            parts.append(f" (caused by: {type(self.cause).__name__}: {str(self.cause)})")
        if self.context:
            parts.append(f" Context: {self.context}")
        return "".join(parts)


# === Asset exceptions ===

class AssetResolutionError(SceneBuildError):
    """Image data could not be turned into a canvas asset"""
    pass


class ImageDecodeError(AssetResolutionError):
    """Data URI payload could not be decoded into an image"""
    pass


class AssetRegistrationError(AssetResolutionError):
    """Canvas runtime refused the asset record"""
    pass


# === Scene graph exceptions ===

class SceneGraphError(SceneBuildError):
    """Scene graph rejected a create/delete call"""
    pass


class DuplicateShapeError(SceneGraphError):
    """A shape with the same identifier already exists"""

    def __init__(self, shape_id: str, message: Optional[str] = None, **kwargs):
        super().__init__(message or f"Shape already exists: {shape_id}", **kwargs)
        self.shape_id = shape_id


class ConcurrentRebuildError(SceneBuildError):
    """A rebuild was requested while another one is still running"""
    pass
