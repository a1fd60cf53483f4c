"""FastAPI application serving derived workspace artifacts."""

import logging
from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dancer import __version__
from dancer.cache import ArtifactCache, ArtifactKind
from dancer.config import ServeConfig
from dancer.exceptions import DancerError
from dancer.exporters import default_generators
from dancer.serve.orchestrator import build_orchestrators
from dancer.serve.router import router
from dancer.workspace.store import WorkspaceStore

logger = logging.getLogger(__name__)


async def _dancer_error_handler(request: Request, exc: DancerError) -> JSONResponse:
    """Render every DancerError as the uniform error envelope."""
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"success": False, "error": exc.to_dict()}, status_code=exc.status_code)


def create_app(
    config: Optional[ServeConfig] = None,
    store: Optional[WorkspaceStore] = None,
    generators: Optional[Dict[ArtifactKind, Callable[[str], Any]]] = None,
) -> FastAPI:
    """Create the FastAPI application.

    The artifact cache is created here and lives as long as the app. It is
    subscribed to the store so that any workspace mutation drops that
    workspace's cached artifacts.

    Args:
        config: Serve configuration. If None, loads the default config file
        store: Workspace store. If None, uses the configured data directory
        generators: Generator per artifact kind. If None, uses the built-in exporters

    Returns:
        Configured FastAPI application
    """
    if config is None:
        from dancer.config import load_config

        config = load_config()
    if store is None:
        store = WorkspaceStore(config.resolve_data_dir())
    if generators is None:
        generators = default_generators(store)

    cache = ArtifactCache()
    store.subscribe(cache.clear_workspace)

    app = FastAPI(title="Dancer Serve", version=__version__)
    app.state.config = config
    app.state.store = store
    app.state.cache = cache
    app.state.orchestrators = build_orchestrators(cache, store, generators)

    app.add_exception_handler(DancerError, _dancer_error_handler)
    app.include_router(router, prefix=config.base_path)

    @app.get("/api/health")
    async def health():
        return {"status": "ok", "workspaces": len(store.list())}

    return app
