"""
Harbor catalog loader.

The harbor table ships as `marinecast/catalog/harbors.json`; deployments can
point `catalog.harbors_path` at their own file instead. Either way we validate
into typed Pydantic models once and hand out the same immutable tuple on every
call, so route endpoints can look harbors up by id without re-reading disk.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources

from pydantic import TypeAdapter

from marinecast.core.env import resolve_project_path
from marinecast.domain.models import Harbor


_HARBORS_ADAPTER = TypeAdapter(list[Harbor])


@lru_cache
def load_harbors(path: str | None = None) -> tuple[Harbor, ...]:
    """Load and validate the harbor table (cached per path).

    `None` reads the packaged default table.
    """
    if path:
        text = resolve_project_path(path).read_text(encoding="utf-8")
    else:
        text = resources.files("marinecast.catalog").joinpath("harbors.json").read_text(encoding="utf-8")
    return tuple(_HARBORS_ADAPTER.validate_python(json.loads(text)))


def get_harbor(harbor_id: str, *, path: str | None = None) -> Harbor | None:
    """Find a harbor by id, or None if the table has no such entry."""
    for harbor in load_harbors(path):
        if harbor.id == harbor_id:
            return harbor
    return None
