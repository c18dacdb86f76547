from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, TypeVar

from .math3d import (
    Quaternion,
    Vector3,
    quat,
    quat_inverse,
    quat_multiply,
    quat_normalize,
    quat_rotate,
    vec3,
)


C = TypeVar("C", bound="Component")


class Component:
    """Something attached to exactly one scene node and discoverable by type."""

    def __init__(self) -> None:
        self._node: SceneNode | None = None

    @property
    def node(self) -> SceneNode | None:
        return self._node

    def _attach(self, node: SceneNode) -> None:
        if self._node is not None:
            raise ValueError(f"{type(self).__name__} is already attached to `{self._node.name}`")
        self._node = node


class Graphic(Component):
    """Marker for nodes that draw something (image, text, mesh face)."""


class Behaviour(Component):
    """Component with an enable/disable lifecycle.

    The behaviour is live when it is enabled, attached, and its node is active in
    the hierarchy and not destroyed. `on_enable` / `on_disable` fire on each
    transition of that combined state, so they always alternate.
    """

    def __init__(self, *, enabled: bool = True) -> None:
        super().__init__()
        self._enabled = enabled
        self._live = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = bool(value)
        self._refresh_lifecycle()

    @property
    def is_live(self) -> bool:
        return self._live

    def on_enable(self) -> None:
        pass

    def on_disable(self) -> None:
        pass

    def _refresh_lifecycle(self) -> None:
        node = self._node
        should_be_live = (
            self._enabled and node is not None and not node.destroyed and node.active_in_hierarchy
        )
        if should_be_live == self._live:
            return
        self._live = should_be_live
        if should_be_live:
            self.on_enable()
        else:
            self.on_disable()


class SceneNode:
    """Named transform node: local TRS plus ordered children and components."""

    def __init__(
        self,
        name: str,
        *,
        parent: SceneNode | None = None,
        position: Iterable[float] | None = None,
        rotation: Iterable[float] | None = None,
        local_scale: Iterable[float] | float = 1.0,
        active: bool = True,
    ) -> None:
        if not isinstance(name, str):
            raise ValueError("node name must be a string")
        self.name = name
        self.position: Vector3 = vec3(0.0 if position is None else position)
        self.rotation: Quaternion = quat(rotation)
        self._local_scale: Vector3 = vec3(local_scale)
        self._active = active
        self._destroyed = False
        self._parent: SceneNode | None = None
        self._children: list[SceneNode] = []
        self._components: list[Component] = []
        if parent is not None:
            parent.add_child(self)

    def __repr__(self) -> str:
        return f"SceneNode({self.name!r})"

    @property
    def local_scale(self) -> Vector3:
        return self._local_scale

    @local_scale.setter
    def local_scale(self, value: Iterable[float] | float) -> None:
        self._local_scale = vec3(value)

    @property
    def parent(self) -> SceneNode | None:
        return self._parent

    @property
    def children(self) -> tuple[SceneNode, ...]:
        return tuple(self._children)

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def active(self) -> bool:
        return self._active

    @property
    def active_in_hierarchy(self) -> bool:
        node: SceneNode | None = self
        while node is not None:
            if not node._active:
                return False
            node = node._parent
        return True

    def set_active(self, active: bool) -> None:
        if self._active == active:
            return
        self._active = active
        self._refresh_subtree()

    def add_child(self, child: SceneNode) -> SceneNode:
        if child is self or child in self.iter_ancestors():
            raise ValueError("cannot parent a node under itself or its descendants")
        if child._parent is not None:
            child._parent._children.remove(child)
        child._parent = self
        self._children.append(child)
        child._refresh_subtree()
        return child

    def add_component(self, component: C) -> C:
        if self._destroyed:
            raise RuntimeError(f"node `{self.name}` is destroyed")
        component._attach(self)
        self._components.append(component)
        if isinstance(component, Behaviour):
            component._refresh_lifecycle()
        return component

    def get_component(self, component_type: type[C]) -> C | None:
        for component in self._components:
            if isinstance(component, component_type):
                return component
        return None

    def get_components(self, component_type: type[C]) -> list[C]:
        return [c for c in self._components if isinstance(c, component_type)]

    def find_child(self, name: str) -> SceneNode | None:
        for child in self._children:
            if child.name == name:
                return child
        return None

    def iter_ancestors(self) -> Iterator[SceneNode]:
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    def iter_depth_first(self) -> Iterator[SceneNode]:
        """Pre-order walk of descendants (self excluded), children in order."""

        for child in self._children:
            yield child
            yield from child.iter_depth_first()

    def iter_breadth_first(self) -> Iterator[tuple[int, SceneNode]]:
        """Level-order walk of descendants (self excluded) as `(depth, node)`."""

        pending: deque[tuple[int, SceneNode]] = deque((1, c) for c in self._children)
        while pending:
            depth, node = pending.popleft()
            yield depth, node
            pending.extend((depth + 1, c) for c in node._children)

    def destroy(self) -> None:
        if self._destroyed:
            return
        for child in list(self._children):
            child.destroy()
        self._destroyed = True
        for component in self._components:
            if isinstance(component, Behaviour):
                component._refresh_lifecycle()
        if self._parent is not None:
            self._parent._children.remove(self)
            self._parent = None

    @property
    def world_position(self) -> Vector3:
        if self._parent is None:
            return self.position.copy()
        parent_pos = self._parent.world_position
        parent_rot = self._parent.world_rotation
        return parent_pos + quat_rotate(parent_rot, self.position)

    @world_position.setter
    def world_position(self, value: Iterable[float]) -> None:
        target = vec3(value)
        if self._parent is None:
            self.position = target
            return
        parent_rot = self._parent.world_rotation
        self.position = quat_rotate(quat_inverse(parent_rot), target - self._parent.world_position)

    @property
    def world_rotation(self) -> Quaternion:
        if self._parent is None:
            return self.rotation.copy()
        return quat_normalize(quat_multiply(self._parent.world_rotation, self.rotation))

    @world_rotation.setter
    def world_rotation(self, value: Iterable[float]) -> None:
        target = quat(value)
        if self._parent is None:
            self.rotation = target
            return
        self.rotation = quat_normalize(quat_multiply(quat_inverse(self._parent.world_rotation), target))

    def _refresh_subtree(self) -> None:
        for component in self._components:
            if isinstance(component, Behaviour):
                component._refresh_lifecycle()
        for child in self._children:
            child._refresh_subtree()
