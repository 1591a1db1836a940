"""Integration tests for Profiles API."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

PROFILE = {"status": "Developer", "skills": "python, sql"}


async def _me(client: AsyncClient, headers: dict[str, str]) -> dict:
    response = await client.get("/api/auth", headers=headers)
    return response.json()


class TestUpsertProfile:
    """POST /api/profile"""

    @pytest.mark.asyncio
    async def test_create_then_update_keeps_identity(
        self, client: AsyncClient, auth_headers
    ) -> None:
        created = await client.post("/api/profile", json=PROFILE, headers=auth_headers)
        updated = await client.post(
            "/api/profile",
            json={"status": "Lead", "skills": "go", "company": "Acme"},
            headers=auth_headers,
        )

        assert created.status_code == 201
        assert updated.status_code == 200
        assert updated.json()["_id"] == created.json()["_id"]
        assert updated.json()["status"] == "Lead"
        assert updated.json()["skills"] == ["go"]
        assert updated.json()["company"] == "Acme"

    @pytest.mark.asyncio
    async def test_skills_are_split_and_trimmed(self, client: AsyncClient, auth_headers) -> None:
        response = await client.post(
            "/api/profile",
            json={"status": "Developer", "skills": " python , sql,, go "},
            headers=auth_headers,
        )

        assert response.json()["skills"] == ["python", "sql", "go"]

    @pytest.mark.asyncio
    async def test_response_carries_owner(self, client: AsyncClient, auth_headers) -> None:
        me = await _me(client, auth_headers)

        response = await client.post("/api/profile", json=PROFILE, headers=auth_headers)

        owner = response.json()["user"]
        assert owner == {"_id": me["_id"], "name": "Ann", "avatar": me["avatar"]}

    @pytest.mark.asyncio
    async def test_omitted_fields_are_left_alone(self, client: AsyncClient, auth_headers) -> None:
        await client.post(
            "/api/profile",
            json={**PROFILE, "bio": "Hello", "location": "Berlin"},
            headers=auth_headers,
        )

        response = await client.post(
            "/api/profile", json={**PROFILE, "location": "Paris"}, headers=auth_headers
        )

        assert response.json()["bio"] == "Hello"
        assert response.json()["location"] == "Paris"

    @pytest.mark.asyncio
    async def test_explicit_null_clears_field(self, client: AsyncClient, auth_headers) -> None:
        await client.post(
            "/api/profile",
            json={**PROFILE, "company": "Acme", "bio": "Hello"},
            headers=auth_headers,
        )

        response = await client.post(
            "/api/profile", json={**PROFILE, "company": None}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json()["company"] is None
        assert response.json()["bio"] == "Hello"

    @pytest.mark.asyncio
    async def test_status_cannot_be_null(self, client: AsyncClient, auth_headers) -> None:
        response = await client.post(
            "/api/profile", json={"status": None, "skills": "go"}, headers=auth_headers
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["param"] == "status"

    @pytest.mark.asyncio
    async def test_social_links_are_replaced_as_a_whole(
        self, client: AsyncClient, auth_headers
    ) -> None:
        await client.post(
            "/api/profile",
            json={**PROFILE, "twitter": "https://twitter.com/ann", "youtube": "https://yt/ann"},
            headers=auth_headers,
        )

        response = await client.post(
            "/api/profile",
            json={**PROFILE, "linkedin": "https://linkedin.com/in/ann"},
            headers=auth_headers,
        )

        assert response.json()["social"] == {"linkedin": "https://linkedin.com/in/ann"}

    @pytest.mark.asyncio
    async def test_status_and_skills_required(self, client: AsyncClient, auth_headers) -> None:
        response = await client.post(
            "/api/profile", json={"status": "", "skills": " , "}, headers=auth_headers
        )

        assert response.status_code == 400
        messages = {error["msg"] for error in response.json()["errors"]}
        assert messages == {"Status is required", "Skills is required"}

    @pytest.mark.asyncio
    async def test_requires_token(self, client: AsyncClient) -> None:
        response = await client.post("/api/profile", json=PROFILE)

        assert response.status_code == 401


class TestReadProfiles:
    """GET /api/profile, /me, /user/{id} and /{id}"""

    @pytest.mark.asyncio
    async def test_me_without_profile(self, client: AsyncClient, auth_headers) -> None:
        response = await client.get("/api/profile/me", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["msg"] == "There is no profile for this user"

    @pytest.mark.asyncio
    async def test_me(self, client: AsyncClient, auth_headers) -> None:
        await client.post("/api/profile", json=PROFILE, headers=auth_headers)

        response = await client.get("/api/profile/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["status"] == "Developer"

    @pytest.mark.asyncio
    async def test_list_profiles_is_public(
        self, client: AsyncClient, register_user
    ) -> None:
        ann = await register_user(name="Ann", email="ann@example.com")
        bob = await register_user(name="Bob", email="bob@example.com")
        await client.post("/api/profile", json=PROFILE, headers=ann)
        await client.post("/api/profile", json=PROFILE, headers=bob)

        response = await client.get("/api/profile")

        assert response.status_code == 200
        assert sorted(p["user"]["name"] for p in response.json()) == ["Ann", "Bob"]

    @pytest.mark.asyncio
    async def test_by_user_and_by_id(self, client: AsyncClient, auth_headers) -> None:
        me = await _me(client, auth_headers)
        created = (await client.post("/api/profile", json=PROFILE, headers=auth_headers)).json()

        by_user = await client.get(f"/api/profile/user/{me['_id']}")
        by_id = await client.get(f"/api/profile/{created['_id']}")

        assert by_user.status_code == 200
        assert by_id.status_code == 200
        assert by_user.json()["_id"] == by_id.json()["_id"] == created["_id"]

    @pytest.mark.asyncio
    async def test_unknown_user_has_no_profile(self, client: AsyncClient) -> None:
        response = await client.get(f"/api/profile/user/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["msg"] == "There is no profile for this user"

    @pytest.mark.asyncio
    async def test_unknown_profile_id(self, client: AsyncClient) -> None:
        response = await client.get(f"/api/profile/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["msg"] == "Profile not found"

    @pytest.mark.asyncio
    async def test_malformed_id_is_validation_error(self, client: AsyncClient) -> None:
        response = await client.get("/api/profile/user/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["errors"][0]["param"] == "user_id"


class TestExperienceAndEducation:
    """POST/DELETE /api/profile/experience and /api/profile/education"""

    @pytest.mark.asyncio
    async def test_experience_add_and_remove(self, client: AsyncClient, auth_headers) -> None:
        await client.post("/api/profile", json=PROFILE, headers=auth_headers)

        first = await client.post(
            "/api/profile/experience",
            json={"title": "Junior", "company": "Acme", "from": "2018-01-01", "to": "2019-12-31"},
            headers=auth_headers,
        )
        second = await client.post(
            "/api/profile/experience",
            json={"title": "Senior", "company": "Acme", "from": "2020-01-01", "current": True},
            headers=auth_headers,
        )

        assert first.status_code == 200
        experience = second.json()["experience"]
        assert [e["title"] for e in experience] == ["Senior", "Junior"]
        assert experience[1]["from"] == "2018-01-01"
        assert experience[1]["to"] == "2019-12-31"
        assert experience[0]["to"] is None
        assert experience[0]["current"] is True

        removed = await client.delete(
            f"/api/profile/experience/{experience[1]['_id']}", headers=auth_headers
        )

        assert removed.status_code == 200
        assert [e["title"] for e in removed.json()["experience"]] == ["Senior"]

    @pytest.mark.asyncio
    async def test_remove_unknown_experience_is_noop(
        self, client: AsyncClient, auth_headers
    ) -> None:
        await client.post("/api/profile", json=PROFILE, headers=auth_headers)
        await client.post(
            "/api/profile/experience",
            json={"title": "Dev", "company": "Acme", "from": "2020-01-01"},
            headers=auth_headers,
        )

        response = await client.delete(f"/api/profile/experience/{uuid4()}", headers=auth_headers)

        assert response.status_code == 200
        assert len(response.json()["experience"]) == 1

    @pytest.mark.asyncio
    async def test_experience_validation(self, client: AsyncClient, auth_headers) -> None:
        await client.post("/api/profile", json=PROFILE, headers=auth_headers)

        response = await client.post(
            "/api/profile/experience",
            json={"company": "Acme"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        params = {error["param"] for error in response.json()["errors"]}
        assert params == {"title", "from"}

    @pytest.mark.asyncio
    async def test_experience_needs_profile(self, client: AsyncClient, auth_headers) -> None:
        response = await client.post(
            "/api/profile/experience",
            json={"title": "Dev", "company": "Acme", "from": "2020-01-01"},
            headers=auth_headers,
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_education_add_and_remove(self, client: AsyncClient, auth_headers) -> None:
        await client.post("/api/profile", json=PROFILE, headers=auth_headers)

        added = await client.post(
            "/api/profile/education",
            json={
                "school": "MIT",
                "degree": "BSc",
                "fieldofstudy": "CS",
                "from": "2014-09-01",
                "to": "2018-06-30",
            },
            headers=auth_headers,
        )

        assert added.status_code == 200
        entry = added.json()["education"][0]
        assert entry["school"] == "MIT"
        assert entry["fieldofstudy"] == "CS"

        removed = await client.delete(
            f"/api/profile/education/{entry['_id']}", headers=auth_headers
        )

        assert removed.json()["education"] == []

    @pytest.mark.asyncio
    async def test_remove_unknown_education_is_noop(
        self, client: AsyncClient, auth_headers
    ) -> None:
        await client.post("/api/profile", json=PROFILE, headers=auth_headers)
        await client.post(
            "/api/profile/education",
            json={"school": "MIT", "degree": "BSc", "fieldofstudy": "CS", "from": "2014-09-01"},
            headers=auth_headers,
        )

        response = await client.delete(f"/api/profile/education/{uuid4()}", headers=auth_headers)

        assert response.status_code == 200
        assert [e["school"] for e in response.json()["education"]] == ["MIT"]

    @pytest.mark.asyncio
    async def test_upsert_keeps_entries(self, client: AsyncClient, auth_headers) -> None:
        await client.post("/api/profile", json=PROFILE, headers=auth_headers)
        await client.post(
            "/api/profile/education",
            json={"school": "MIT", "degree": "BSc", "fieldofstudy": "CS", "from": "2014-09-01"},
            headers=auth_headers,
        )

        response = await client.post(
            "/api/profile", json={**PROFILE, "status": "Lead"}, headers=auth_headers
        )

        assert len(response.json()["education"]) == 1


class TestDeleteAccount:
    """DELETE /api/profile"""

    @pytest.mark.asyncio
    async def test_delete_removes_profile_and_user_but_keeps_posts(
        self, client: AsyncClient, auth_headers
    ) -> None:
        me = await _me(client, auth_headers)
        await client.post("/api/profile", json=PROFILE, headers=auth_headers)
        await client.post("/api/post", json={"text": "Still here"}, headers=auth_headers)

        response = await client.delete("/api/profile", headers=auth_headers)

        assert response.status_code == 204
        assert (await client.get(f"/api/profile/user/{me['_id']}")).status_code == 404
        assert (await client.get("/api/auth", headers=auth_headers)).status_code == 404
        posts = (await client.get("/api/post")).json()
        assert [p["text"] for p in posts] == ["Still here"]

    @pytest.mark.asyncio
    async def test_delete_without_profile(self, client: AsyncClient, auth_headers) -> None:
        response = await client.delete("/api/profile", headers=auth_headers)

        assert response.status_code == 204
        assert (await client.get("/api/auth", headers=auth_headers)).status_code == 404


class TestGitHubRepos:
    """GET /api/profile/github/{username}"""

    @pytest.mark.asyncio
    async def test_returns_repos(self, client: AsyncClient) -> None:
        response = await client.get("/api/profile/github/octocat")

        assert response.status_code == 200
        assert [r["name"] for r in response.json()] == ["newest", "middle", "oldest"]

    @pytest.mark.asyncio
    async def test_unknown_github_user(self, client: AsyncClient) -> None:
        response = await client.get("/api/profile/github/ghost")

        assert response.status_code == 404
        assert response.json()["msg"] == "No Github profile found"
