"""Editor profile and starting-point documents for a workspace."""

from typing import Any, Dict, List, Optional

from dancer.workspace.models import Shape, Statement, Workspace

LITERAL_NODE_TYPES = {"literal"}


def _property_type(statement: Statement) -> str:
    if statement.value_shape:
        return "resource"
    if (statement.value_node_type or "").lower() in LITERAL_NODE_TYPES or statement.value_data_type:
        return "literal"
    if statement.value_constraint_type and statement.value_constraint_type.lower() in ("iristem", "picklist"):
        return "lookup"
    return "resource"


def _property_template(statement: Statement) -> Dict[str, Any]:
    constraint: Dict[str, Any] = {
        "valueTemplateRefs": [statement.value_shape] if statement.value_shape else [],
        "useValuesFrom": [],
        "defaults": [],
    }
    if statement.value_data_type:
        constraint["valueDataType"] = {"dataTypeURI": statement.value_data_type}
    if statement.value_constraint:
        if (statement.value_constraint_type or "").lower() == "picklist":
            constraint["useValuesFrom"] = statement.value_constraint.split()
        else:
            constraint["defaults"] = [{"defaultLiteral": statement.value_constraint}]

    template = {
        "propertyURI": statement.property_id,
        "propertyLabel": statement.property_label or statement.property_id,
        "mandatory": "true" if statement.mandatory else "false",
        "repeatable": "true" if statement.repeatable else "false",
        "type": _property_type(statement),
        "valueConstraint": constraint,
    }
    if statement.note:
        template["remark"] = statement.note
    return template


def _resource_template(workspace: Workspace, shape: Shape) -> Dict[str, Any]:
    return {
        "id": f"{workspace.id}:{shape.shape_id}",
        "resourceLabel": shape.shape_label or shape.shape_id,
        "resourceURI": shape.shape_id,
        "propertyTemplates": [_property_template(s) for s in shape.statements],
    }


def export_profile(workspace: Workspace) -> Dict[str, Any]:
    """Build the editor profile document for a workspace.

    Every shape becomes a resource template and every statement a property
    template. An empty workspace yields a profile with no templates.
    """
    return {
        "id": workspace.id,
        "name": workspace.name,
        "updatedAt": workspace.updated_at.isoformat(),
        "resourceTemplates": [_resource_template(workspace, shape) for shape in workspace.shapes],
    }


def export_starting_points(workspace: Workspace) -> Optional[Dict[str, Any]]:
    """Build the starting-points document for a workspace.

    Returns:
        The document, or None when no shape is flagged as a starting point
    """
    start_shapes: List[Shape] = [shape for shape in workspace.shapes if shape.start]
    if not start_shapes:
        return None

    return {
        "name": workspace.name,
        "configType": "startingPoints",
        "json": [
            {
                "menuGroup": workspace.name,
                "menuItems": [
                    {
                        "label": shape.shape_label or shape.shape_id,
                        "type": [f"{workspace.id}:{shape.shape_id}"],
                    }
                    for shape in start_shapes
                ],
            }
        ],
    }
