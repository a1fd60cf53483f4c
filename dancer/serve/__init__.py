"""HTTP serving of cached workspace artifacts."""

from .app import create_app
from .orchestrator import ExportOrchestrator, StartingPointsOrchestrator, build_orchestrators
from .resolution import is_canonical_id, resolve_workspace_id

__all__ = [
    "ExportOrchestrator",
    "StartingPointsOrchestrator",
    "build_orchestrators",
    "create_app",
    "is_canonical_id",
    "resolve_workspace_id",
]
