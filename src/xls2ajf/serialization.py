"""
Serialization helpers for AJF forms (AjfForm, Node, ChoicesOrigin).

Renders the tree into the AJF dict shape and back, with JSON/YAML on top.
The dict layout is the output contract and is kept explicit here rather
than derived from the dataclasses. Empty optional attributes are omitted.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from xls2ajf.model import (
    AjfForm,
    Choice,
    ChoicesOrigin,
    ChoicesType,
    FieldType,
    FieldValidation,
    Node,
    NodeType,
    OriginType,
)


def choices_origin_to_dict(o: ChoicesOrigin) -> Dict[str, Any]:
    return {
        "type": o.type.value,
        "name": o.name,
        "choicesType": o.choices_type.value,
        "choices": [{"value": c.value, "label": c.label} for c in o.choices],
    }


def choices_origin_from_dict(d: Dict[str, Any]) -> ChoicesOrigin:
    return ChoicesOrigin(
        name=d["name"],
        choices=[Choice(value=c["value"], label=c.get("label", "")) for c in d.get("choices", [])],
        type=OriginType(d.get("type", OriginType.FIXED.value)),
        choices_type=ChoicesType(d.get("choicesType", ChoicesType.STRING.value)),
    )


def node_to_dict(n: Node) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "id": n.id,
        "previous": n.previous,
        "name": n.name,
        "label": n.label,
        "nodeType": n.node_type.value,
        "nodes": [node_to_dict(child) for child in n.nodes],
    }
    if n.field_type is not None:
        d["fieldType"] = n.field_type.value
    if n.choices_origin_ref is not None:
        d["choicesOriginRef"] = n.choices_origin_ref
    if n.html is not None:
        d["HTML"] = n.html
    if n.validation is not None:
        d["validation"] = {"notEmpty": n.validation.not_empty}
    if n.max_reps is not None:
        d["maxReps"] = n.max_reps
    for key in ("relevant", "constraint", "calculation"):
        if getattr(n, key):
            d[key] = getattr(n, key)
    return d


def node_from_dict(d: Dict[str, Any]) -> Node:
    validation = d.get("validation")
    return Node(
        node_type=NodeType(d["nodeType"]),
        name=d.get("name", ""),
        label=d.get("label", ""),
        id=d.get("id", 0),
        previous=d.get("previous", 0),
        nodes=[node_from_dict(child) for child in d.get("nodes", [])],
        field_type=FieldType(d["fieldType"]) if "fieldType" in d else None,
        choices_origin_ref=d.get("choicesOriginRef"),
        html=d.get("HTML"),
        validation=FieldValidation(not_empty=validation.get("notEmpty", False)) if validation else None,
        max_reps=d.get("maxReps"),
        relevant=d.get("relevant", ""),
        constraint=d.get("constraint", ""),
        calculation=d.get("calculation", ""),
    )


def form_to_dict(f: AjfForm) -> Dict[str, Any]:
    return {
        "choicesOrigins": [choices_origin_to_dict(o) for o in f.choices_origins],
        "slides": [node_to_dict(s) for s in f.slides],
    }


def form_from_dict(d: Dict[str, Any]) -> AjfForm:
    return AjfForm(
        choices_origins=[choices_origin_from_dict(o) for o in d.get("choicesOrigins", [])],
        slides=[node_from_dict(s) for s in d.get("slides", [])],
    )


def form_to_json(f: AjfForm, indent: int | None = 2) -> str:
    return json.dumps(form_to_dict(f), indent=indent, ensure_ascii=False)


def form_from_json(s: str) -> AjfForm:
    return form_from_dict(json.loads(s))


def form_to_yaml(f: AjfForm) -> str:
    return yaml.safe_dump(form_to_dict(f), sort_keys=False, allow_unicode=True)


def form_from_yaml(s: str) -> AjfForm:
    return form_from_dict(yaml.safe_load(s))
