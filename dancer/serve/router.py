"""Serve routes for editor profiles, starting points and CSV/TSV exports.

These endpoints serve the data directly (not as downloads). Every
``{workspace_id}`` accepts a canonical id or a name-based slug.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from dancer.cache import ArtifactKind
from dancer.serve.resolution import resolved_workspace_id
from dancer.slugs import build_slug_map, slugify

NO_CACHE = {"Cache-Control": "no-cache"}

router = APIRouter(tags=["serve"])


def _orchestrator(request: Request, kind: ArtifactKind):
    return request.app.state.orchestrators[kind]


def _workspace_entry(ws, base_path: str, duplicate_slugs) -> Dict[str, Any]:
    slug = slugify(ws.name)
    entry: Dict[str, Any] = {
        "id": ws.id,
        "name": ws.name,
        "updatedAt": ws.updated_at.isoformat(),
        "profileUrl": f"{base_path}/{ws.id}/profile",
        "startingPointsUrl": f"{base_path}/{ws.id}/starting-points",
        "csvUrl": f"{base_path}/{ws.id}/csv",
        "tsvUrl": f"{base_path}/{ws.id}/tsv",
    }

    if slug:
        entry["profileUrlAlias"] = f"{base_path}/{slug}/profile"
        entry["startingPointsUrlAlias"] = f"{base_path}/{slug}/starting-points"

    if slug in duplicate_slugs:
        entry["warning"] = (
            f'Multiple workspaces share the normalized name "{slug}". '
            "The alias URLs resolve to the first workspace encountered."
        )

    return entry


@router.get("/workspaces")
def list_workspaces(request: Request):
    """List all workspaces available for serving."""
    workspaces = request.app.state.store.list()
    slug_map = build_slug_map(workspaces)
    base_path = request.app.state.config.base_path

    data = [_workspace_entry(ws, base_path, slug_map.duplicate_slugs) for ws in workspaces]
    return {"success": True, "data": data}


@router.get("/cache/stats")
def cache_stats(request: Request):
    """Current cache entry counts (for debugging)."""
    stats = request.app.state.cache.get_stats()
    return {"success": True, "data": stats.to_dict()}


@router.get("/{workspace_id}/profile")
def serve_profile(request: Request, workspace_id: str = Depends(resolved_workspace_id)):
    profile = _orchestrator(request, ArtifactKind.PROFILE).serve(workspace_id)
    return JSONResponse(profile, headers=NO_CACHE)


@router.get("/{workspace_id}/starting-points")
def serve_starting_points(request: Request, workspace_id: str = Depends(resolved_workspace_id)):
    starting_points = _orchestrator(request, ArtifactKind.STARTING_POINTS).serve(workspace_id)
    return JSONResponse(starting_points, headers=NO_CACHE)


@router.get("/{workspace_id}/csv")
def serve_csv(request: Request, workspace_id: str = Depends(resolved_workspace_id)):
    csv_text = _orchestrator(request, ArtifactKind.CSV).serve(workspace_id)
    return Response(csv_text, media_type="text/csv", headers=NO_CACHE)


@router.get("/{workspace_id}/tsv")
def serve_tsv(request: Request, workspace_id: str = Depends(resolved_workspace_id)):
    tsv_text = _orchestrator(request, ArtifactKind.TSV).serve(workspace_id)
    return Response(tsv_text, media_type="text/tab-separated-values", headers=NO_CACHE)
