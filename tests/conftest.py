"""Test configuration and fixtures."""

from collections import Counter
from typing import Any, Callable, Dict

import pytest
from fastapi.testclient import TestClient

from dancer.cache import ArtifactCache, ArtifactKind
from dancer.config import ServeConfig
from dancer.exporters import default_generators
from dancer.serve import create_app
from dancer.workspace import Shape, Statement, WorkspaceStore


class CountingGenerators:
    """Wraps generators per kind and counts invocations per (kind, workspace id)."""

    def __init__(self, generators: Dict[ArtifactKind, Callable[[str], Any]]):
        self.inner = dict(generators)
        self.calls: Counter = Counter()

    def __getitem__(self, kind: ArtifactKind) -> Callable[[str], Any]:
        def generate(workspace_id: str):
            self.calls[(kind, workspace_id)] += 1
            return self.inner[kind](workspace_id)

        return generate

    def __contains__(self, kind) -> bool:
        return kind in self.inner

    def count(self, kind: ArtifactKind, workspace_id: str = None) -> int:
        if workspace_id is None:
            return sum(n for (k, _), n in self.calls.items() if k == kind)
        return self.calls[(kind, workspace_id)]


@pytest.fixture
def cli_runner():
    """Create a CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()


@pytest.fixture
def sample_shapes():
    """A small profile: a starting Work shape referencing an Instance shape."""
    return [
        Shape(
            shape_id="Work",
            shape_label="Work",
            start=True,
            statements=[
                Statement(
                    property_id="bf:title",
                    property_label="Title",
                    mandatory=True,
                    value_node_type="literal",
                ),
                Statement(
                    property_id="bf:hasInstance",
                    property_label="Has instance",
                    repeatable=True,
                    value_shape="Instance",
                    note="Link to an instance",
                ),
            ],
        ),
        Shape(
            shape_id="Instance",
            shape_label="Instance",
            statements=[
                Statement(property_id="bf:extent", value_data_type="xsd:string"),
            ],
        ),
    ]


@pytest.fixture
def store(tmp_path) -> WorkspaceStore:
    return WorkspaceStore(tmp_path / "workspaces")


@pytest.fixture
def cache() -> ArtifactCache:
    return ArtifactCache()


@pytest.fixture
def generators(store) -> CountingGenerators:
    return CountingGenerators(default_generators(store))


@pytest.fixture
def serve_config() -> ServeConfig:
    return ServeConfig()


@pytest.fixture
def app(serve_config, store, generators):
    return create_app(config=serve_config, store=store, generators=generators)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
