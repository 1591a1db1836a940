"""Central client state store."""

from collections.abc import Callable
from typing import Any

import structlog

from client.types import Action, ActionType

logger = structlog.get_logger()

State = dict[str, Any]
Reducer = Callable[[State | None, Action], State]
Listener = Callable[[], None]
Dispatch = Callable[[Action], Action]


class Store:
    """Hold the state tree and apply actions to it through a reducer.

    The reducer is called with ``None`` once at construction to build the
    initial state, unless one is given.
    """

    def __init__(self, reducer: Reducer, initial_state: State | None = None) -> None:
        self._reducer = reducer
        if initial_state is None:
            initial_state = reducer(None, Action(type=ActionType.INIT))
        self._state = initial_state
        self._listeners: list[Listener] = []
        self._dispatching = False

    def get_state(self) -> State:
        return self._state

    def dispatch(self, action: Action) -> Action:
        """Reduce ``action`` into a new state and notify subscribers."""
        if self._dispatching:
            raise RuntimeError("Reducers may not dispatch actions")

        self._dispatching = True
        try:
            self._state = self._reducer(self._state, action)
        finally:
            self._dispatching = False

        logger.debug("action_dispatched", action_type=str(action.type))
        for listener in list(self._listeners):
            listener()
        return action

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
