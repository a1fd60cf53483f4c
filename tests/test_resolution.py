"""Tests for workspace identifier resolution."""

import uuid
from unittest.mock import MagicMock

import pytest

from dancer.exceptions import WorkspaceNotFoundError
from dancer.serve.resolution import is_canonical_id, resolve_workspace_id


class TestIsCanonicalId:
    def test_uuid(self):
        assert is_canonical_id(str(uuid.uuid4()))

    def test_uppercase_uuid(self):
        assert is_canonical_id(str(uuid.uuid4()).upper())

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "monographs",
            "12345678-1234-1234-1234-12345678901",
            "12345678123412341234123456789012",
            "g2345678-1234-1234-1234-123456789012",
            " 12345678-1234-1234-1234-123456789012",
        ],
    )
    def test_not_canonical(self, value):
        assert not is_canonical_id(value)


class TestResolveWorkspaceId:
    def test_canonical_id_passes_through_without_lookup(self):
        store = MagicMock()
        workspace_id = str(uuid.uuid4())

        assert resolve_workspace_id(workspace_id, store) == workspace_id
        store.list.assert_not_called()

    def test_slug_resolves_to_first_claimant(self, store):
        first = store.create("Foo Bar!")
        store.create("foo--bar")

        assert resolve_workspace_id("foo-bar", store) == first.id

    def test_unknown_slug(self, store):
        store.create("Alpha")

        with pytest.raises(WorkspaceNotFoundError):
            resolve_workspace_id("beta", store)

    def test_slug_follows_rename(self, store):
        ws = store.create("Old Name")
        assert resolve_workspace_id("old-name", store) == ws.id

        store.rename(ws.id, "New Name")

        assert resolve_workspace_id("new-name", store) == ws.id
        with pytest.raises(WorkspaceNotFoundError):
            resolve_workspace_id("old-name", store)
