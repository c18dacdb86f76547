from __future__ import annotations

import logging
import sys
from typing import Iterable

from .scene import Component, SceneNode


LOGGER = logging.getLogger(__name__)


def find_loaded_type(qualified_name: str) -> type | None:
    """Resolve `package.module.Class` (or `module.Outer.Inner`) among loaded modules.

    Nothing is imported: an optional toolkit that the application never loaded is
    simply absent. The longest loaded module prefix wins.
    """

    parts = [p for p in qualified_name.strip().split(".") if p]
    if len(parts) < 2:
        return None
    for split in range(len(parts) - 1, 0, -1):
        module = sys.modules.get(".".join(parts[:split]))
        if module is None:
            continue
        obj: object = module
        try:
            for attr in parts[split:]:
                obj = getattr(obj, attr, None)
                if obj is None:
                    break
        except Exception as exc:  # noqa: BLE001
            # Lazy module attributes may fail with anything, e.g. a missing backend.
            LOGGER.debug("type lookup `%s` raised: %s", qualified_name, exc)
            continue
        if isinstance(obj, type):
            return obj
    return None


def try_get_capability(
    node: SceneNode,
    type_names: Iterable[str],
) -> tuple[type, Component] | None:
    """Return the first `(type, component)` whose type is loaded and present on `node`."""

    for type_name in type_names:
        capability_type = find_loaded_type(type_name)
        if capability_type is None:
            LOGGER.debug("capability type `%s` is not loaded", type_name)
            continue
        for component in node.components:
            if isinstance(component, capability_type):
                return capability_type, component
        LOGGER.debug("capability `%s` not present on `%s`", type_name, node.name)
    return None
