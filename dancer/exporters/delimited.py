"""DCTAP CSV/TSV export."""

import csv
import io

from dancer.workspace.models import Workspace

DCTAP_COLUMNS = [
    "shapeID",
    "shapeLabel",
    "propertyID",
    "propertyLabel",
    "mandatory",
    "repeatable",
    "valueNodeType",
    "valueDataType",
    "valueConstraint",
    "valueConstraintType",
    "valueShape",
    "note",
]


def _flag(value: bool) -> str:
    return "TRUE" if value else "FALSE"


def export_delimited(workspace: Workspace, delimiter: str = ",") -> str:
    """Render a workspace as a DCTAP table.

    One row per statement; shapes without statements still get a row so they
    survive a round trip.

    Args:
        workspace: Workspace to export
        delimiter: "," for CSV, "\\t" for TSV

    Returns:
        The table as text, header row first
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator="\n")
    writer.writerow(DCTAP_COLUMNS)

    for shape in workspace.shapes:
        shape_cells = [shape.shape_id, shape.shape_label or ""]
        if not shape.statements:
            writer.writerow(shape_cells + [""] * (len(DCTAP_COLUMNS) - 2))
            continue
        for statement in shape.statements:
            writer.writerow(
                shape_cells
                + [
                    statement.property_id,
                    statement.property_label or "",
                    _flag(statement.mandatory),
                    _flag(statement.repeatable),
                    statement.value_node_type or "",
                    statement.value_data_type or "",
                    statement.value_constraint or "",
                    statement.value_constraint_type or "",
                    statement.value_shape or "",
                    statement.note or "",
                ]
            )

    return buffer.getvalue()
