"""Resolve the ``{workspace_id}`` path parameter to a canonical workspace id."""

import re

from fastapi import Request

from dancer.exceptions import WorkspaceNotFoundError
from dancer.slugs import build_slug_map
from dancer.workspace.store import WorkspaceStore

UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)


def is_canonical_id(value: str) -> bool:
    return bool(UUID_RE.match(value))


def resolve_workspace_id(value: str, store: WorkspaceStore) -> str:
    """Map a canonical id or a slug to a canonical id.

    Canonical ids pass through untouched, whether or not such a workspace
    exists. Anything else is looked up as a slug in a slug map built from the
    current listing.

    Raises:
        WorkspaceNotFoundError: If the value is not an id and no workspace claims it as slug
    """
    if is_canonical_id(value):
        return value

    workspace_id = build_slug_map(store.list()).resolve(value)
    if not workspace_id:
        raise WorkspaceNotFoundError()
    return workspace_id


def resolved_workspace_id(workspace_id: str, request: Request) -> str:
    """FastAPI dependency applied to every ``/{workspace_id}/...`` route."""
    return resolve_workspace_id(workspace_id, request.app.state.store)
