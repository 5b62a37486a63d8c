"""OpenAPI schema enrichment — collects metadata from guards."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastapi_route_guards.guard import Guard


def collect_openapi_metadata(guards: Sequence[Guard]) -> dict[str, Any]:
    """Collect and merge OpenAPI metadata from a route's effective guards."""
    responses: dict[str, Any] = {}

    for guard in guards:
        spec = guard.openapi_spec()
        if spec is None:
            continue
        if "responses" in spec:
            responses.update(spec["responses"])

    result: dict[str, Any] = {}
    if responses:
        result["responses"] = responses
    if guards:
        result["x-guards"] = [guard.name for guard in guards]
    return result
