"""Pydantic models for workspaces and their DCTAP shapes."""

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dancer.exceptions import WorkspaceNotFoundError

__all__ = ["Statement", "Shape", "Workspace", "WorkspaceNotFoundError", "utcnow"]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Statement(BaseModel):
    """One DCTAP statement template (a row in the tabular profile)."""

    model_config = ConfigDict(
        extra="allow",
        str_strip_whitespace=True,
    )

    property_id: str = Field(..., description="Property IRI or prefixed name")
    property_label: Optional[str] = None
    mandatory: bool = False
    repeatable: bool = False
    value_node_type: Optional[str] = Field(default=None, description="IRI, literal or bnode")
    value_data_type: Optional[str] = None
    value_constraint: Optional[str] = None
    value_constraint_type: Optional[str] = None
    value_shape: Optional[str] = Field(default=None, description="shape_id of a nested shape")
    note: Optional[str] = None


class Shape(BaseModel):
    """A DCTAP shape: a labelled group of statement templates."""

    model_config = ConfigDict(
        extra="allow",
        str_strip_whitespace=True,
    )

    shape_id: str
    shape_label: Optional[str] = None
    start: bool = Field(default=False, description="Offered as an entry point in the editor")
    statements: List[Statement] = Field(default_factory=list)


class Workspace(BaseModel):
    """A named, uniquely identified container of shapes."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
    )

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    shapes: List[Shape] = Field(default_factory=list)

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def parse_datetime(cls, v):
        """Parse ISO format strings to datetime objects; naive values are taken as UTC."""
        if isinstance(v, str):
            v = datetime.fromisoformat(v.replace("Z", "+00:00"))
        if isinstance(v, datetime) and v.tzinfo is None:
            v = v.replace(tzinfo=timezone.utc)
        return v

    def get_shape(self, shape_id: str) -> Optional[Shape]:
        for shape in self.shapes:
            if shape.shape_id == shape_id:
                return shape
        return None
