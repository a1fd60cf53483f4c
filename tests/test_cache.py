"""Tests for the artifact cache."""

import pytest

from dancer.cache import NOT_FOUND, ArtifactCache, ArtifactKind, CacheLookup


class TestGetSet:
    def test_miss(self, cache):
        lookup = cache.get(ArtifactKind.PROFILE, "ws-1")
        assert lookup is NOT_FOUND
        assert lookup.found is False

    def test_hit(self, cache):
        cache.set(ArtifactKind.PROFILE, "ws-1", {"a": 1})

        lookup = cache.get(ArtifactKind.PROFILE, "ws-1")

        assert lookup == CacheLookup(found=True, payload={"a": 1})

    @pytest.mark.parametrize("payload", [None, "", {}, [], 0])
    def test_empty_payload_is_a_hit(self, cache, payload):
        cache.set(ArtifactKind.STARTING_POINTS, "ws-1", payload)

        lookup = cache.get(ArtifactKind.STARTING_POINTS, "ws-1")

        assert lookup.found is True
        assert lookup.payload == payload

    def test_set_overwrites(self, cache):
        cache.set(ArtifactKind.CSV, "ws-1", "old")
        cache.set(ArtifactKind.CSV, "ws-1", "new")

        assert cache.get(ArtifactKind.CSV, "ws-1").payload == "new"
        assert cache.get_stats().counts[ArtifactKind.CSV] == 1

    def test_kinds_are_independent(self, cache):
        cache.set(ArtifactKind.CSV, "ws-1", "a,b")

        assert cache.get(ArtifactKind.TSV, "ws-1").found is False
        assert cache.get(ArtifactKind.PROFILE, "ws-1").found is False

    def test_accepts_kind_values(self, cache):
        cache.set("tsv", "ws-1", "a\tb")
        assert cache.get(ArtifactKind.TSV, "ws-1").payload == "a\tb"


class TestStats:
    def test_empty(self, cache):
        assert cache.get_stats().to_dict() == {
            "profile": 0,
            "startingPoints": 0,
            "csv": 0,
            "tsv": 0,
            "total": 0,
        }

    def test_counts_each_key_once(self, cache):
        cache.set(ArtifactKind.PROFILE, "ws-1", {})
        cache.set(ArtifactKind.PROFILE, "ws-1", {"again": True})
        cache.set(ArtifactKind.PROFILE, "ws-2", {})
        cache.set(ArtifactKind.STARTING_POINTS, "ws-1", None)
        cache.set(ArtifactKind.TSV, "ws-2", "")

        stats = cache.get_stats()

        assert stats.counts == {
            ArtifactKind.PROFILE: 2,
            ArtifactKind.STARTING_POINTS: 1,
            ArtifactKind.CSV: 0,
            ArtifactKind.TSV: 1,
        }
        assert stats.total == 4

    def test_stats_is_a_snapshot(self, cache):
        stats = cache.get_stats()
        cache.set(ArtifactKind.CSV, "ws-1", "x")
        assert stats.total == 0


class TestClear:
    def test_clear_workspace_removes_all_kinds(self, cache):
        for kind in ArtifactKind:
            cache.set(kind, "ws-1", None)
        cache.set(ArtifactKind.PROFILE, "ws-2", {})

        removed = cache.clear_workspace("ws-1")

        assert removed == 4
        for kind in ArtifactKind:
            assert cache.get(kind, "ws-1").found is False
        assert cache.get(ArtifactKind.PROFILE, "ws-2").found is True

    def test_clear_workspace_unknown(self, cache):
        assert cache.clear_workspace("nope") == 0

    def test_clear(self):
        cache = ArtifactCache()
        cache.set(ArtifactKind.CSV, "a", "1")
        cache.set(ArtifactKind.TSV, "b", "2")

        assert cache.clear() == 2
        assert cache.get_stats().total == 0
