"""Async action creators.

Each creator calls the API and dispatches plain events describing the
outcome. Failures are mirrored as ``*_ERROR`` events carrying the HTTP status
and reason, plus one danger alert per server-side validation error.
"""

import asyncio
import uuid
from typing import Any

import httpx
import structlog

from client.api import DevConnectorAPI
from client.store import Dispatch
from client.types import Action, ActionType

logger = structlog.get_logger()


def set_alert(
    dispatch: Dispatch,
    msg: str,
    alert_type: str = "success",
    timeout: float | None = None,
) -> str:
    """Add an alert; with ``timeout`` it is removed again on the running loop."""
    alert_id = uuid.uuid4().hex
    dispatch(
        Action(
            type=ActionType.SET_ALERT,
            payload={"id": alert_id, "msg": msg, "alert_type": alert_type},
        )
    )
    if timeout is not None:
        asyncio.get_running_loop().call_later(
            timeout, dispatch, Action(type=ActionType.REMOVE_ALERT, payload=alert_id)
        )
    return alert_id


def _error_payload(err: httpx.HTTPStatusError) -> dict[str, Any]:
    return {"msg": err.response.reason_phrase, "status": err.response.status_code}


def _alert_errors(dispatch: Dispatch, err: httpx.HTTPStatusError) -> None:
    """Raise a danger alert for each ``{"errors": [...]}`` entry in the response."""
    try:
        body = err.response.json()
    except ValueError:
        return
    errors = body.get("errors") if isinstance(body, dict) else None
    for error in errors or []:
        msg = error.get("msg", "")
        if error.get("param"):
            msg = msg.replace("~", error["param"])
        set_alert(dispatch, msg, "danger")


def _fail(
    dispatch: Dispatch,
    err: httpx.HTTPStatusError,
    error_type: ActionType,
    alert: bool = False,
) -> None:
    logger.info(
        "action_failed",
        action_type=str(error_type),
        status_code=err.response.status_code,
    )
    if alert:
        _alert_errors(dispatch, err)
    dispatch(Action(type=error_type, payload=_error_payload(err)))


# --- Auth ---


async def load_user(api: DevConnectorAPI, dispatch: Dispatch) -> None:
    if not api.auth_token:
        dispatch(Action(type=ActionType.AUTH_ERROR))
        return
    try:
        user = await api.get_auth_user()
    except httpx.HTTPStatusError:
        dispatch(Action(type=ActionType.AUTH_ERROR))
        return
    dispatch(Action(type=ActionType.USER_LOADED, payload=user))


async def register(
    api: DevConnectorAPI, dispatch: Dispatch, name: str, email: str, password: str
) -> None:
    try:
        data = await api.register(name, email, password)
    except httpx.HTTPStatusError as err:
        _alert_errors(dispatch, err)
        dispatch(Action(type=ActionType.REGISTER_FAIL))
        return

    api.set_auth_token(data["token"])
    dispatch(Action(type=ActionType.REGISTER_SUCCESS, payload=data))
    await load_user(api, dispatch)


async def login(api: DevConnectorAPI, dispatch: Dispatch, email: str, password: str) -> None:
    try:
        data = await api.login(email, password)
    except httpx.HTTPStatusError as err:
        _alert_errors(dispatch, err)
        dispatch(Action(type=ActionType.LOGIN_FAIL))
        return

    api.set_auth_token(data["token"])
    dispatch(Action(type=ActionType.LOGIN_SUCCESS, payload=data))
    await load_user(api, dispatch)


def logout(api: DevConnectorAPI, dispatch: Dispatch) -> None:
    api.set_auth_token(None)
    dispatch(Action(type=ActionType.CLEAR_PROFILE))
    dispatch(Action(type=ActionType.LOGOUT))


# --- Profiles ---


async def get_current_profile(api: DevConnectorAPI, dispatch: Dispatch) -> None:
    try:
        data = await api.get_my_profile()
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.PROFILE_ERROR)
        return
    dispatch(Action(type=ActionType.GET_PROFILE, payload=data))


async def get_all_profiles(api: DevConnectorAPI, dispatch: Dispatch) -> None:
    dispatch(Action(type=ActionType.CLEAR_PROFILE))
    try:
        data = await api.get_profiles()
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.PROFILE_ERROR)
        return
    dispatch(Action(type=ActionType.GET_PROFILES, payload=data))


async def get_profile_by_user(api: DevConnectorAPI, dispatch: Dispatch, user_id: str) -> None:
    try:
        data = await api.get_profile_by_user(user_id)
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.PROFILE_ERROR)
        return
    dispatch(Action(type=ActionType.GET_PROFILE, payload=data))


async def get_github_repos(api: DevConnectorAPI, dispatch: Dispatch, username: str) -> None:
    try:
        data = await api.get_github_repos(username)
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.PROFILE_ERROR)
        return
    dispatch(Action(type=ActionType.GET_REPOS, payload=data))


async def create_profile(
    api: DevConnectorAPI,
    dispatch: Dispatch,
    fields: dict[str, Any],
    edit: bool = False,
) -> None:
    try:
        data = await api.upsert_profile(fields)
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.PROFILE_ERROR, alert=True)
        return
    dispatch(Action(type=ActionType.GET_PROFILE, payload=data))
    set_alert(dispatch, "Profile Updated" if edit else "Profile Created", "success")


async def delete_account(api: DevConnectorAPI, dispatch: Dispatch) -> None:
    """Delete the caller's profile and account. Irreversible."""
    try:
        await api.delete_profile()
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.PROFILE_ERROR, alert=True)
        return
    api.set_auth_token(None)
    dispatch(Action(type=ActionType.CLEAR_PROFILE))
    dispatch(Action(type=ActionType.ACCOUNT_DELETED))
    set_alert(dispatch, "Account removed successfully")


async def add_experience(api: DevConnectorAPI, dispatch: Dispatch, fields: dict[str, Any]) -> None:
    try:
        data = await api.add_experience(fields)
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.PROFILE_ERROR, alert=True)
        return
    dispatch(Action(type=ActionType.UPDATE_PROFILE, payload=data))
    set_alert(dispatch, "Experience Added", "success")


async def delete_experience(api: DevConnectorAPI, dispatch: Dispatch, experience_id: str) -> None:
    try:
        data = await api.delete_experience(experience_id)
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.PROFILE_ERROR, alert=True)
        return
    dispatch(Action(type=ActionType.UPDATE_PROFILE, payload=data))
    set_alert(dispatch, "Experience Removed", "success")


async def add_education(api: DevConnectorAPI, dispatch: Dispatch, fields: dict[str, Any]) -> None:
    try:
        data = await api.add_education(fields)
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.PROFILE_ERROR, alert=True)
        return
    dispatch(Action(type=ActionType.UPDATE_PROFILE, payload=data))
    set_alert(dispatch, "Education Added", "success")


async def delete_education(api: DevConnectorAPI, dispatch: Dispatch, education_id: str) -> None:
    try:
        data = await api.delete_education(education_id)
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.PROFILE_ERROR, alert=True)
        return
    dispatch(Action(type=ActionType.UPDATE_PROFILE, payload=data))
    set_alert(dispatch, "Education Removed", "success")


# --- Posts ---


async def get_posts(api: DevConnectorAPI, dispatch: Dispatch) -> None:
    try:
        data = await api.get_posts()
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.POST_ERROR)
        return
    dispatch(Action(type=ActionType.GET_POSTS, payload=data))


async def get_post(api: DevConnectorAPI, dispatch: Dispatch, post_id: str) -> None:
    try:
        data = await api.get_post(post_id)
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.POST_ERROR)
        return
    dispatch(Action(type=ActionType.GET_POST, payload=data))


async def add_post(api: DevConnectorAPI, dispatch: Dispatch, text: str) -> None:
    try:
        data = await api.add_post(text)
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.POST_ERROR, alert=True)
        return
    dispatch(Action(type=ActionType.ADD_POST, payload=data))
    set_alert(dispatch, "Post added successfully", "success")


async def delete_post(api: DevConnectorAPI, dispatch: Dispatch, post_id: str) -> None:
    try:
        await api.delete_post(post_id)
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.POST_ERROR)
        return
    dispatch(Action(type=ActionType.POST_DELETED, payload=post_id))
    set_alert(dispatch, "Post deleted successfully", "success")


async def add_like(api: DevConnectorAPI, dispatch: Dispatch, post_id: str) -> None:
    try:
        likes = await api.like_post(post_id)
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.POST_ERROR)
        return
    dispatch(Action(type=ActionType.UPDATE_LIKES, payload={"post_id": post_id, "likes": likes}))


async def remove_like(api: DevConnectorAPI, dispatch: Dispatch, post_id: str) -> None:
    try:
        likes = await api.unlike_post(post_id)
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.POST_ERROR)
        return
    dispatch(Action(type=ActionType.UPDATE_LIKES, payload={"post_id": post_id, "likes": likes}))


async def add_comment(api: DevConnectorAPI, dispatch: Dispatch, post_id: str, text: str) -> None:
    try:
        comments = await api.add_comment(post_id, text)
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.POST_ERROR, alert=True)
        return
    dispatch(Action(type=ActionType.ADD_COMMENT, payload=comments))
    set_alert(dispatch, "Comment added successfully", "success")


async def delete_comment(
    api: DevConnectorAPI, dispatch: Dispatch, post_id: str, comment_id: str
) -> None:
    try:
        comments = await api.delete_comment(post_id, comment_id)
    except httpx.HTTPStatusError as err:
        _fail(dispatch, err, ActionType.POST_ERROR)
        return
    dispatch(Action(type=ActionType.COMMENT_DELETED, payload=comments))
    set_alert(dispatch, "Comment deleted successfully", "success")
