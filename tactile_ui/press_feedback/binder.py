from __future__ import annotations

import collections.abc
from dataclasses import dataclass
import inspect
import logging
import typing
from typing import Callable, Iterable, Mapping, Sequence

from tactile_core.capabilities import try_get_capability
from tactile_core.scene import SceneNode
from tactile_ui.controls.button import Button

from .config import DEFAULT_INTERACTABLE_TYPES


LOGGER = logging.getLogger(__name__)

Action = Callable[[], None]

ACTION_PULSE = "pulse"
ACTION_PRESS_DOWN = "press_down"
ACTION_RELEASE_UP = "release_up"

# Spellings seen across interactable toolkit versions; order is priority.
CLICKED_CHANNEL_NAMES: tuple[str, ...] = ("OnClicked", "onClicked", "on_clicked", "clicked")
SELECT_ENTERED_CHANNEL_NAMES: tuple[str, ...] = (
    "OnSelectEntered",
    "onSelectEntered",
    "m_OnSelectEntered",
    "FirstSelectEntered",
    "m_FirstSelectEntered",
    "SelectEntered",
    "selectEntered",
    "m_SelectEntered",
    "on_select_entered",
    "first_select_entered",
    "select_entered",
)
SELECT_EXITED_CHANNEL_NAMES: tuple[str, ...] = (
    "OnSelectExited",
    "onSelectExited",
    "m_OnSelectExited",
    "LastSelectExited",
    "m_LastSelectExited",
    "SelectExited",
    "selectExited",
    "m_SelectExited",
    "on_select_exited",
    "last_select_exited",
    "select_exited",
)


@dataclass(frozen=True)
class ChannelRoute:
    """Maps the first existing channel among `candidate_names` to an action."""

    action: str
    candidate_names: tuple[str, ...]


DEFAULT_CHANNEL_ROUTES: tuple[ChannelRoute, ...] = (
    ChannelRoute(ACTION_PULSE, CLICKED_CHANNEL_NAMES),
    ChannelRoute(ACTION_PRESS_DOWN, SELECT_ENTERED_CHANNEL_NAMES),
    ChannelRoute(ACTION_RELEASE_UP, SELECT_EXITED_CHANNEL_NAMES),
)


class ErasedPayloadHandler:
    """One-argument listener that drops its payload and runs a fixed action."""

    def __init__(self, action: Action) -> None:
        self._action = action

    def __repr__(self) -> str:
        return f"ErasedPayloadHandler({self._action!r})"

    def __call__(self, _payload: object) -> None:
        self._action()


class Binding:
    """A live subscription plus the means to undo it, exactly once."""

    def __init__(
        self,
        source: object,
        channel_name: str,
        handler: Callable[..., object],
        unsubscribe: Callable[[Callable[..., object]], object],
    ) -> None:
        self.source = source
        self.channel_name = channel_name
        self.handler = handler
        self._unsubscribe = unsubscribe
        self._released = False

    def __repr__(self) -> str:
        return f"Binding({type(self.source).__name__}.{self.channel_name}, released={self._released})"

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> bool:
        """Unsubscribe; errors propagate but the binding still counts as released."""

        if self._released:
            return False
        self._released = True
        self._unsubscribe(self.handler)
        return True


def channel_listener_arity(channel: object) -> int | None:
    """Number of arguments the channel passes to its listeners, if knowable.

    Channels may declare `listener_arity`; otherwise the `Callable[[...], ...]`
    annotation on `add_listener`'s listener parameter is consulted.
    """

    declared = getattr(channel, "listener_arity", None)
    if isinstance(declared, int) and not isinstance(declared, bool):
        return declared
    add = getattr(channel, "add_listener", None)
    if add is None:
        return None
    try:
        params = list(inspect.signature(add).parameters.values())
        hints = typing.get_type_hints(add)
    except Exception:  # noqa: BLE001
        return None
    if len(params) != 1:
        return None
    annotation = hints.get(params[0].name)
    if typing.get_origin(annotation) is not collections.abc.Callable:
        return None
    args = typing.get_args(annotation)
    if not args or not isinstance(args[0], list):
        return None
    return len(args[0])


def bind_channel(source: object, channel_name: str, action: Action) -> Binding | None:
    """Subscribe `action` to `source.<channel_name>` if its shape is supported."""

    try:
        channel = getattr(source, channel_name, None)
    except Exception as exc:  # noqa: BLE001
        LOGGER.debug("channel `%s` lookup raised: %s", channel_name, exc)
        return None
    if channel is None:
        return None
    try:
        add = getattr(channel, "add_listener", None)
        remove = getattr(channel, "remove_listener", None)
        if not callable(add) or not callable(remove):
            LOGGER.debug("channel `%s` has no add/remove listener pair", channel_name)
            return None
        arity = channel_listener_arity(channel)
    except Exception as exc:  # noqa: BLE001
        LOGGER.debug("channel `%s` inspection raised: %s", channel_name, exc)
        return None
    handler: Callable[..., object]
    if arity == 0:
        handler = action
    elif arity == 1:
        handler = ErasedPayloadHandler(action)
    else:
        LOGGER.debug("channel `%s` listener arity %r is unsupported", channel_name, arity)
        return None
    try:
        add(handler)
    except Exception as exc:  # noqa: BLE001
        LOGGER.debug("channel `%s` rejected listener: %s", channel_name, exc)
        return None
    return Binding(source, channel_name, handler, remove)


def bind_first_channel(source: object, candidate_names: Iterable[str], action: Action) -> Binding | None:
    for name in candidate_names:
        binding = bind_channel(source, name, action)
        if binding is not None:
            return binding
    return None


class CapabilityAdapterBinder:
    """Finds the press sources present on a node and wires them to actions.

    A first-party `Button` is bound through its `on_click`. A richer interactable
    is looked up by type name among loaded modules, so the toolkit providing it is
    optional; each of its channel routes binds the first matching channel. Any
    failure just means fewer bindings.
    """

    def __init__(
        self,
        *,
        interactable_types: Sequence[str] = DEFAULT_INTERACTABLE_TYPES,
        routes: Sequence[ChannelRoute] = DEFAULT_CHANNEL_ROUTES,
    ) -> None:
        self.interactable_types = tuple(interactable_types)
        self.routes = tuple(routes)

    def bind(self, node: SceneNode, actions: Mapping[str, Action]) -> list[Binding]:
        bindings: list[Binding] = []
        pulse = actions.get(ACTION_PULSE)
        button = node.get_component(Button)
        if button is not None and pulse is not None:
            binding = bind_channel(button, "on_click", pulse)
            if binding is not None:
                bindings.append(binding)

        try:
            found = try_get_capability(node, self.interactable_types)
        except Exception as exc:  # noqa: BLE001
            LOGGER.debug("interactable lookup on `%s` raised: %s", node.name, exc)
            return bindings
        if found is None:
            LOGGER.debug("no interactable capability on `%s`", node.name)
            return bindings
        capability_type, source = found
        for route in self.routes:
            action = actions.get(route.action)
            if action is None:
                continue
            binding = bind_first_channel(source, route.candidate_names, action)
            if binding is None:
                LOGGER.debug("%s: no channel for `%s`", capability_type.__name__, route.action)
                continue
            LOGGER.debug("%s.%s -> %s", capability_type.__name__, binding.channel_name, route.action)
            bindings.append(binding)
        return bindings
