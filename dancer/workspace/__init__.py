"""Workspace data owned by Dancer.

A workspace is a named container of DCTAP shapes. The store persists
workspaces and notifies subscribers (the artifact cache) when one changes.
"""

from .models import Shape, Statement, Workspace, WorkspaceNotFoundError
from .store import WorkspaceStore

__all__ = [
    "Shape",
    "Statement",
    "Workspace",
    "WorkspaceNotFoundError",
    "WorkspaceStore",
]
