"""Generators computing derived artifacts from a workspace."""

from typing import Any, Callable, Dict

from dancer.cache import ArtifactKind
from dancer.exceptions import WorkspaceNotFoundError
from dancer.workspace.store import WorkspaceStore

from .delimited import DCTAP_COLUMNS, export_delimited
from .profile import export_profile, export_starting_points

Generator = Callable[[str], Any]


def default_generators(store: WorkspaceStore) -> Dict[ArtifactKind, Generator]:
    """Bind the built-in exporters to workspace ids loaded from ``store``."""

    def load(workspace_id: str):
        workspace = store.get(workspace_id)
        if workspace is None:
            raise WorkspaceNotFoundError(f"Workspace '{workspace_id}' not found")
        return workspace

    return {
        ArtifactKind.PROFILE: lambda wid: export_profile(load(wid)),
        ArtifactKind.STARTING_POINTS: lambda wid: export_starting_points(load(wid)),
        ArtifactKind.CSV: lambda wid: export_delimited(load(wid), ","),
        ArtifactKind.TSV: lambda wid: export_delimited(load(wid), "\t"),
    }


__all__ = [
    "DCTAP_COLUMNS",
    "Generator",
    "default_generators",
    "export_delimited",
    "export_profile",
    "export_starting_points",
]
