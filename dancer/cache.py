"""In-memory cache of derived workspace artifacts.

One store per artifact kind, each mapping a workspace id to the payload that
was last computed for it. Entries live for the lifetime of the process; the
workspace store is responsible for clearing a workspace's entries whenever it
mutates that workspace (see ``WorkspaceStore.subscribe``).
"""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ArtifactKind(str, Enum):
    """Derived representations served for a workspace."""

    PROFILE = "profile"
    STARTING_POINTS = "starting_points"
    CSV = "csv"
    TSV = "tsv"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    ArtifactKind.PROFILE: "Profile",
    ArtifactKind.STARTING_POINTS: "Starting points",
    ArtifactKind.CSV: "CSV",
    ArtifactKind.TSV: "TSV",
}

_STATS_KEYS = {
    ArtifactKind.PROFILE: "profile",
    ArtifactKind.STARTING_POINTS: "startingPoints",
    ArtifactKind.CSV: "csv",
    ArtifactKind.TSV: "tsv",
}


@dataclass(frozen=True)
class CacheLookup:
    """Result of a cache lookup.

    ``found`` tells a miss apart from a hit whose payload is itself empty or
    None. Callers must branch on ``found``, never on the payload's truthiness.
    """

    found: bool
    payload: Any = None

    @classmethod
    def hit(cls, payload: Any) -> "CacheLookup":
        return cls(found=True, payload=payload)


NOT_FOUND = CacheLookup(found=False)


@dataclass(frozen=True)
class CacheStats:
    """Snapshot of entry counts per artifact kind."""

    counts: Dict[ArtifactKind, int]

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def to_dict(self) -> Dict[str, int]:
        data = {_STATS_KEYS[kind]: self.counts.get(kind, 0) for kind in ArtifactKind}
        data["total"] = self.total
        return data


class ArtifactCache:
    """Per-kind map of workspace id -> computed payload.

    At most one entry exists per (kind, workspace id); ``set`` overwrites.
    Map access is guarded by a lock so the cache may be shared across threads,
    but the lock only covers individual reads and writes: two callers that miss
    on the same key will both compute and the last ``set`` wins.
    """

    def __init__(self):
        self._stores: Dict[ArtifactKind, Dict[str, Any]] = {kind: {} for kind in ArtifactKind}
        self._lock = threading.Lock()

    def get(self, kind: ArtifactKind, workspace_id: str) -> CacheLookup:
        """Look up the cached payload for a workspace.

        Returns:
            ``CacheLookup.hit(payload)`` if an entry exists (payload may be None),
            ``NOT_FOUND`` otherwise
        """
        store = self._stores[ArtifactKind(kind)]
        with self._lock:
            if workspace_id in store:
                return CacheLookup.hit(store[workspace_id])
        return NOT_FOUND

    def set(self, kind: ArtifactKind, workspace_id: str, payload: Any) -> None:
        """Store a payload, replacing any previous entry for the same key."""
        store = self._stores[ArtifactKind(kind)]
        with self._lock:
            store[workspace_id] = payload

    def clear_workspace(self, workspace_id: str) -> int:
        """Drop every entry for a workspace across all kinds.

        Called from the workspace store's mutation hook; not part of the read path.

        Returns:
            Number of entries removed
        """
        removed = 0
        with self._lock:
            for store in self._stores.values():
                if store.pop(workspace_id, NOT_FOUND) is not NOT_FOUND:
                    removed += 1
        return removed

    def clear(self) -> int:
        """Drop every entry. Returns the number of entries removed."""
        with self._lock:
            removed = sum(len(store) for store in self._stores.values())
            for store in self._stores.values():
                store.clear()
        return removed

    def get_stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(counts={kind: len(store) for kind, store in self._stores.items()})
