"""Action types and the action envelope dispatched to the store."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class ActionType(StrEnum):
    """Every event the client state understands."""

    # Sent once by the store to build the initial state
    INIT = "@@INIT"

    # Alerts
    SET_ALERT = "SET_ALERT"
    REMOVE_ALERT = "REMOVE_ALERT"

    # Auth
    REGISTER_SUCCESS = "REGISTER_SUCCESS"
    REGISTER_FAIL = "REGISTER_FAIL"
    LOGIN_SUCCESS = "LOGIN_SUCCESS"
    LOGIN_FAIL = "LOGIN_FAIL"
    USER_LOADED = "USER_LOADED"
    AUTH_ERROR = "AUTH_ERROR"
    LOGOUT = "LOGOUT"
    ACCOUNT_DELETED = "ACCOUNT_DELETED"

    # Profiles
    GET_PROFILE = "GET_PROFILE"
    GET_PROFILES = "GET_PROFILES"
    UPDATE_PROFILE = "UPDATE_PROFILE"
    CLEAR_PROFILE = "CLEAR_PROFILE"
    PROFILE_ERROR = "PROFILE_ERROR"
    GET_REPOS = "GET_REPOS"

    # Posts
    GET_POSTS = "GET_POSTS"
    GET_POST = "GET_POST"
    ADD_POST = "ADD_POST"
    POST_DELETED = "POST_DELETED"
    UPDATE_LIKES = "UPDATE_LIKES"
    ADD_COMMENT = "ADD_COMMENT"
    COMMENT_DELETED = "COMMENT_DELETED"
    POST_ERROR = "POST_ERROR"


@dataclass(frozen=True)
class Action:
    """A plain event: a type and an optional payload."""

    type: ActionType
    payload: Any = None
