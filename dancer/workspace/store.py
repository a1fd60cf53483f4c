"""File-backed workspace storage.

Each workspace is one JSON file named ``<id>.json`` under the store root.
The store owns workspace data, so it also owns cache invalidation: every
mutation notifies subscribers with the affected workspace id.
"""

import logging
from datetime import timedelta
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from pydantic import ValidationError

from .models import Shape, Workspace, WorkspaceNotFoundError, utcnow

logger = logging.getLogger(__name__)

MutationListener = Callable[[str], None]


class WorkspaceStore:
    """Lists, loads and mutates workspaces stored as JSON files."""

    def __init__(self, root: Path):
        self.root = Path(root)
        self._listeners: List[MutationListener] = []

    def subscribe(self, listener: MutationListener) -> None:
        """Register a callback invoked with the workspace id after each mutation."""
        self._listeners.append(listener)

    def _path(self, workspace_id: str) -> Path:
        return self.root / f"{workspace_id}.json"

    def _load(self, path: Path) -> Optional[Workspace]:
        try:
            return Workspace.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            logger.warning("Skipping unreadable workspace file %s: %s", path, e)
            return None

    def _save(self, workspace: Workspace) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        self._path(workspace.id).write_text(workspace.model_dump_json(indent=2), encoding="utf-8")

    def _notify(self, workspace_id: str) -> None:
        for listener in self._listeners:
            listener(workspace_id)

    def list(self) -> List[Workspace]:
        """List all workspaces, oldest first.

        Ordering is by creation time, then id (only for hand-written files
        sharing a timestamp), so it is stable across calls.
        """
        if not self.root.exists():
            return []

        workspaces = []
        for path in self.root.glob("*.json"):
            workspace = self._load(path)
            if workspace is not None:
                workspaces.append(workspace)

        return sorted(workspaces, key=lambda ws: (ws.created_at, ws.id))

    def get(self, workspace_id: str) -> Optional[Workspace]:
        """Load a workspace by id, or None if it does not exist."""
        # Ids are used as file names; reject anything that could escape the root
        if not workspace_id or "/" in workspace_id or "\\" in workspace_id or workspace_id.startswith("."):
            return None
        path = self._path(workspace_id)
        if not path.exists():
            return None
        return self._load(path)

    def _require(self, workspace_id: str) -> Workspace:
        workspace = self.get(workspace_id)
        if workspace is None:
            raise WorkspaceNotFoundError(f"Workspace '{workspace_id}' not found")
        return workspace

    def create(self, name: str, shapes: Iterable[Shape] = ()) -> Workspace:
        """Create and persist a new workspace.

        ``created_at`` is kept strictly after every existing workspace's, so
        listing order (and with it the slug tie-break) follows creation order.
        """
        workspace = Workspace(name=name, shapes=list(shapes))
        existing = self.list()
        if existing and workspace.created_at <= existing[-1].created_at:
            workspace.created_at = existing[-1].created_at + timedelta(microseconds=1)
            workspace.updated_at = workspace.created_at
        self._save(workspace)
        logger.info("Created workspace %s (%s)", workspace.name, workspace.id)
        return workspace

    def rename(self, workspace_id: str, name: str) -> Workspace:
        workspace = self._require(workspace_id)
        workspace.name = name
        return self._commit(workspace)

    def replace_shapes(self, workspace_id: str, shapes: Iterable[Shape]) -> Workspace:
        workspace = self._require(workspace_id)
        workspace.shapes = list(shapes)
        return self._commit(workspace)

    def delete(self, workspace_id: str) -> None:
        self._require(workspace_id)
        self._path(workspace_id).unlink()
        logger.info("Deleted workspace %s", workspace_id)
        self._notify(workspace_id)

    def _commit(self, workspace: Workspace) -> Workspace:
        workspace.updated_at = utcnow()
        self._save(workspace)
        self._notify(workspace.id)
        return workspace
