"""Cache-or-compute serving of derived workspace artifacts."""

import logging
from typing import Any, Callable, Dict

from dancer.cache import ArtifactCache, ArtifactKind
from dancer.exceptions import AbsentArtifactError, GenerationFailedError, WorkspaceNotFoundError
from dancer.workspace.store import WorkspaceStore

logger = logging.getLogger(__name__)


class ExportOrchestrator:
    """Serves one artifact kind: cached payload if present, else generate and cache.

    There is no de-duplication of concurrent misses. Two callers that both miss
    on the same workspace both run the generator; the last ``set`` wins.
    """

    def __init__(
        self,
        kind: ArtifactKind,
        generator: Callable[[str], Any],
        cache: ArtifactCache,
        store: WorkspaceStore,
    ):
        self.kind = kind
        self.generator = generator
        self.cache = cache
        self.store = store

    def serve(self, workspace_id: str) -> Any:
        """Return the artifact payload for a workspace.

        Raises:
            WorkspaceNotFoundError: If no workspace has this id
            GenerationFailedError: If the generator raised (nothing is cached)
        """
        workspace = self.store.get(workspace_id)
        if workspace is None:
            raise WorkspaceNotFoundError()

        lookup = self.cache.get(self.kind, workspace_id)
        if lookup.found:
            logger.debug("%s served from cache for workspace: %s", self.kind.label, workspace.name)
            return self.check(lookup.payload)

        try:
            payload = self.generator(workspace_id)
        except Exception as e:
            logger.exception("%s generation failed for workspace: %s", self.kind.label, workspace.name)
            raise GenerationFailedError(f"Failed to serve {self.kind.label.lower()}: {e}") from e

        self.cache.set(self.kind, workspace_id, payload)
        logger.info("%s generated and cached for workspace: %s", self.kind.label, workspace.name)
        return self.check(payload)

    def check(self, payload: Any) -> Any:
        """Validate a payload before it is returned, whether fresh or cached."""
        return payload


class StartingPointsOrchestrator(ExportOrchestrator):
    """Starting points may legitimately be absent (None).

    An absent result is cached like any other, and reported as
    ``AbsentArtifactError`` every time it is served.
    """

    def check(self, payload: Any) -> Any:
        if payload is None:
            raise AbsentArtifactError("No starting points found in workspace")
        return payload


_ORCHESTRATOR_CLASSES = {
    ArtifactKind.STARTING_POINTS: StartingPointsOrchestrator,
}


def build_orchestrators(
    cache: ArtifactCache,
    store: WorkspaceStore,
    generators: Dict[ArtifactKind, Callable[[str], Any]],
) -> Dict[ArtifactKind, ExportOrchestrator]:
    """Create one orchestrator per artifact kind.

    Raises:
        ValueError: If a kind has no generator
    """
    missing = [kind.value for kind in ArtifactKind if kind not in generators]
    if missing:
        raise ValueError(f"No generator configured for: {', '.join(missing)}")

    return {
        kind: _ORCHESTRATOR_CLASSES.get(kind, ExportOrchestrator)(kind, generators[kind], cache, store)
        for kind in ArtifactKind
    }
