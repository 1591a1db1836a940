"""Pure reducers for the client state tree.

Every reducer takes the previous slice (``None`` on the first call) and an
action, and returns a new slice without mutating the old one.
"""

from typing import Any

from client.types import Action, ActionType

AlertState = list[dict[str, Any]]
SliceState = dict[str, Any]

_AUTH_SUCCESS = (ActionType.REGISTER_SUCCESS, ActionType.LOGIN_SUCCESS)
_AUTH_RESET = (
    ActionType.REGISTER_FAIL,
    ActionType.LOGIN_FAIL,
    ActionType.AUTH_ERROR,
    ActionType.LOGOUT,
    ActionType.ACCOUNT_DELETED,
)


def alert(state: AlertState | None, action: Action) -> AlertState:
    if state is None:
        state = []

    if action.type == ActionType.SET_ALERT:
        return [*state, action.payload]
    if action.type == ActionType.REMOVE_ALERT:
        return [a for a in state if a["id"] != action.payload]
    return state


def initial_auth_state() -> SliceState:
    return {"token": None, "is_authenticated": False, "loading": True, "user": None}


def auth(state: SliceState | None, action: Action) -> SliceState:
    if state is None:
        state = initial_auth_state()

    if action.type == ActionType.USER_LOADED:
        return {**state, "is_authenticated": True, "loading": False, "user": action.payload}
    if action.type in _AUTH_SUCCESS:
        return {
            **state,
            "token": action.payload["token"],
            "is_authenticated": True,
            "loading": False,
        }
    if action.type in _AUTH_RESET:
        return {
            **state,
            "token": None,
            "is_authenticated": False,
            "loading": False,
            "user": None,
        }
    return state


def initial_profile_state() -> SliceState:
    return {"profile": None, "profiles": [], "repos": [], "loading": True, "error": {}}


def profile(state: SliceState | None, action: Action) -> SliceState:
    if state is None:
        state = initial_profile_state()

    if action.type in (ActionType.GET_PROFILE, ActionType.UPDATE_PROFILE):
        return {**state, "profile": action.payload, "loading": False}
    if action.type == ActionType.GET_PROFILES:
        return {**state, "profiles": action.payload, "loading": False}
    if action.type == ActionType.GET_REPOS:
        return {**state, "repos": action.payload, "loading": False}
    if action.type == ActionType.PROFILE_ERROR:
        return {**state, "error": action.payload, "loading": False, "profile": None}
    if action.type == ActionType.CLEAR_PROFILE:
        return {**state, "profile": None, "repos": [], "loading": False}
    return state


def initial_post_state() -> SliceState:
    return {"post": None, "posts": [], "loading": True, "error": {}}


def post(state: SliceState | None, action: Action) -> SliceState:
    if state is None:
        state = initial_post_state()

    if action.type == ActionType.GET_POSTS:
        return {**state, "posts": action.payload, "loading": False}
    if action.type == ActionType.GET_POST:
        return {**state, "post": action.payload, "loading": False}
    if action.type == ActionType.ADD_POST:
        return {**state, "posts": [action.payload, *state["posts"]], "loading": False}
    if action.type == ActionType.POST_DELETED:
        return {
            **state,
            "posts": [p for p in state["posts"] if p["_id"] != action.payload],
            "loading": False,
        }
    if action.type == ActionType.UPDATE_LIKES:
        post_id, likes = action.payload["post_id"], action.payload["likes"]
        return {
            **state,
            "posts": [
                {**p, "likes": likes} if p["_id"] == post_id else p
                for p in state["posts"]
            ],
            "loading": False,
        }
    if action.type in (ActionType.ADD_COMMENT, ActionType.COMMENT_DELETED):
        return {
            **state,
            "post": {**(state["post"] or {}), "comments": action.payload},
            "loading": False,
        }
    if action.type == ActionType.POST_ERROR:
        return {**state, "error": action.payload, "loading": False}
    return state


def root_reducer(state: dict[str, Any] | None, action: Action) -> dict[str, Any]:
    """Combine the slice reducers into the flat state tree."""
    state = state or {}
    return {
        "alert": alert(state.get("alert"), action),
        "auth": auth(state.get("auth"), action),
        "profile": profile(state.get("profile"), action),
        "post": post(state.get("post"), action),
    }
