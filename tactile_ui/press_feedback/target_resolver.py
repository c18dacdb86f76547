from __future__ import annotations

from typing import Sequence

from tactile_core.scene import Graphic, SceneNode

from .config import DEFAULT_VISUAL_TARGET_NAMES


def find_descendant_by_names(root: SceneNode, names: Sequence[str]) -> SceneNode | None:
    """First descendant matching the earliest name in `names`, nearest depth first.

    Names compare case-insensitively; the root itself is never a candidate.
    """

    wanted = [n.casefold() for n in names]
    if not wanted:
        return None
    # One level-order pass, remembering the first (nearest) hit per name.
    hits: dict[str, SceneNode] = {}
    for _, node in root.iter_breadth_first():
        key = node.name.casefold()
        if key in wanted and key not in hits:
            hits[key] = node
            if key == wanted[0]:
                break
    for key in wanted:
        if key in hits:
            return hits[key]
    return None


def find_first_graphic(root: SceneNode) -> SceneNode | None:
    for node in root.iter_depth_first():
        if node.get_component(Graphic) is not None:
            return node
    return None


def resolve_visual_target(
    root: SceneNode,
    names: Sequence[str] = DEFAULT_VISUAL_TARGET_NAMES,
) -> SceneNode:
    """Pick the node a press should scale: the visible face, not the hit area."""

    named = find_descendant_by_names(root, names)
    if named is not None:
        return named
    graphic = find_first_graphic(root)
    if graphic is not None:
        return graphic
    return root
