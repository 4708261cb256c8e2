"""
CLI display components for resources and readings.
"""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
import json
from typing import Any

from rich.console import Console
from rich.table import Table

from ..models import Resource


def _cell(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def resource_to_dict(resource: Resource) -> dict[str, Any]:
    """JSON-API resource object for ``resource``."""
    return {
        "id": resource.id,
        "type": resource.get_type(),
        "attributes": dict(resource.attributes),
        "relationships": resource.relationships,
    }


def render_json(console: Console, result: Any) -> None:
    if isinstance(result, list):
        payload: Any = [resource_to_dict(r) for r in result]
    elif isinstance(result, Resource):
        payload = resource_to_dict(result)
    elif is_dataclass(result):
        payload = asdict(result)
    else:
        payload = result
    console.print_json(json.dumps(payload, default=str))


def render_resources(console: Console, resources: list[Resource]) -> None:
    """One row per resource, one column per attribute key seen."""
    if not resources:
        console.print("[dim]No resources.[/dim]")
        return
    keys: list[str] = []
    for resource in resources:
        for key in resource.attributes:
            if key not in keys:
                keys.append(key)

    table = Table(title=resources[0].get_type())
    table.add_column("id", style="cyan", no_wrap=True)
    for key in keys:
        table.add_column(key)
    for resource in resources:
        table.add_row(_cell(resource.id), *(_cell(resource.attributes.get(k)) for k in keys))
    console.print(table)


def render_resource(console: Console, resource: Resource) -> None:
    table = Table(title=f"{resource.get_type()} {resource.id}", show_header=False)
    table.add_column("field", style="cyan")
    table.add_column("value")
    for key, value in resource.attributes.items():
        table.add_row(key, _cell(value))
    for name in resource.relationships:
        ids = resource.related_ids(name) or [resource.related_id(name)]
        table.add_row(f"→ {name}", _cell(", ".join(i for i in ids if i) or None))
    console.print(table)


def render_reading(console: Console, reading: Any) -> None:
    values = asdict(reading) if is_dataclass(reading) else (reading or {}).get("attributes", {})
    table = Table(title="current reading", show_header=False)
    table.add_column("field", style="cyan")
    table.add_column("value")
    for key, value in values.items():
        table.add_row(key, _cell(value))
    console.print(table)
