"""Unit tests for the client reducers."""

from client.reducers import (
    alert,
    auth,
    initial_auth_state,
    initial_post_state,
    initial_profile_state,
    post,
    profile,
    root_reducer,
)
from client.types import Action, ActionType


def _post(post_id: str, likes: list | None = None) -> dict:
    return {"_id": post_id, "text": post_id, "likes": likes or [], "comments": []}


class TestAlertReducer:
    def test_set_and_remove(self):
        state = alert(None, Action(ActionType.SET_ALERT, {"id": "a", "msg": "Hi"}))
        state = alert(state, Action(ActionType.SET_ALERT, {"id": "b", "msg": "Yo"}))

        state = alert(state, Action(ActionType.REMOVE_ALERT, "a"))

        assert state == [{"id": "b", "msg": "Yo"}]

    def test_unknown_action_returns_same_state(self):
        state = [{"id": "a"}]

        assert alert(state, Action(ActionType.GET_POSTS, [])) is state


class TestAuthReducer:
    def test_initial_state(self):
        assert auth(None, Action(ActionType.INIT)) == initial_auth_state()

    def test_login_success_stores_token(self):
        state = auth(None, Action(ActionType.LOGIN_SUCCESS, {"token": "t"}))

        assert state["token"] == "t"
        assert state["is_authenticated"] is True
        assert state["loading"] is False

    def test_user_loaded(self):
        user = {"_id": "u1", "name": "Ann"}

        state = auth(None, Action(ActionType.USER_LOADED, user))

        assert state["user"] == user
        assert state["is_authenticated"] is True

    def test_logout_clears_everything(self):
        state = auth(None, Action(ActionType.LOGIN_SUCCESS, {"token": "t"}))
        state = auth(state, Action(ActionType.USER_LOADED, {"_id": "u1"}))

        state = auth(state, Action(ActionType.LOGOUT))

        assert state == {
            "token": None,
            "is_authenticated": False,
            "loading": False,
            "user": None,
        }

    def test_does_not_mutate_previous_state(self):
        before = initial_auth_state()

        auth(before, Action(ActionType.LOGIN_SUCCESS, {"token": "t"}))

        assert before == initial_auth_state()


class TestProfileReducer:
    def test_get_profile(self):
        state = profile(None, Action(ActionType.GET_PROFILE, {"_id": "p1"}))

        assert state["profile"] == {"_id": "p1"}
        assert state["loading"] is False

    def test_profile_error_clears_profile(self):
        state = profile(None, Action(ActionType.GET_PROFILE, {"_id": "p1"}))

        state = profile(state, Action(ActionType.PROFILE_ERROR, {"msg": "Not Found", "status": 404}))

        assert state["profile"] is None
        assert state["error"] == {"msg": "Not Found", "status": 404}

    def test_clear_profile_keeps_list(self):
        state = profile(None, Action(ActionType.GET_PROFILES, [{"_id": "p1"}]))
        state = profile(state, Action(ActionType.GET_REPOS, [{"name": "r"}]))

        state = profile(state, Action(ActionType.CLEAR_PROFILE))

        assert state["profile"] is None
        assert state["repos"] == []
        assert state["profiles"] == [{"_id": "p1"}]

    def test_initial_state(self):
        assert profile(None, Action(ActionType.INIT)) == initial_profile_state()


class TestPostReducer:
    def test_add_post_prepends(self):
        state = post(None, Action(ActionType.GET_POSTS, [_post("old")]))

        state = post(state, Action(ActionType.ADD_POST, _post("new")))

        assert [p["_id"] for p in state["posts"]] == ["new", "old"]

    def test_post_deleted(self):
        state = post(None, Action(ActionType.GET_POSTS, [_post("a"), _post("b")]))

        state = post(state, Action(ActionType.POST_DELETED, "a"))

        assert [p["_id"] for p in state["posts"]] == ["b"]

    def test_update_likes_touches_only_that_post(self):
        original = [_post("a"), _post("b")]
        state = post(None, Action(ActionType.GET_POSTS, original))

        state = post(
            state,
            Action(ActionType.UPDATE_LIKES, {"post_id": "b", "likes": [{"user": "u1"}]}),
        )

        assert state["posts"][0]["likes"] == []
        assert state["posts"][1]["likes"] == [{"user": "u1"}]
        assert original[1]["likes"] == []

    def test_comments_replace_current_post_comments(self):
        state = post(None, Action(ActionType.GET_POST, _post("a")))

        state = post(state, Action(ActionType.ADD_COMMENT, [{"_id": "c1"}]))
        assert state["post"]["comments"] == [{"_id": "c1"}]

        state = post(state, Action(ActionType.COMMENT_DELETED, []))
        assert state["post"]["comments"] == []
        assert state["post"]["_id"] == "a"

    def test_initial_state(self):
        assert post(None, Action(ActionType.INIT)) == initial_post_state()


class TestRootReducer:
    def test_builds_every_slice(self):
        state = root_reducer(None, Action(ActionType.INIT))

        assert set(state) == {"alert", "auth", "profile", "post"}
        assert state["alert"] == []

    def test_account_deleted_resets_auth(self):
        state = root_reducer(None, Action(ActionType.LOGIN_SUCCESS, {"token": "t"}))

        state = root_reducer(state, Action(ActionType.ACCOUNT_DELETED))

        assert state["auth"]["token"] is None
        assert state["auth"]["is_authenticated"] is False
