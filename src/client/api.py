"""HTTP client for the DevConnector API."""

from typing import Any

import httpx

DEFAULT_BASE_URL = "http://localhost:5000"


class DevConnectorAPI:
    """Async wrapper over every API endpoint.

    Non-2xx answers raise ``httpx.HTTPStatusError``; the response stays
    reachable on the exception for error reporting.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> "DevConnectorAPI":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def auth_token(self) -> str | None:
        header = self._client.headers.get("Authorization")
        return header.removeprefix("Bearer ") if header else None

    def set_auth_token(self, token: str | None) -> None:
        """Send ``token`` on every following request, or stop sending one."""
        if token:
            self._client.headers["Authorization"] = f"Bearer {token}"
        else:
            self._client.headers.pop("Authorization", None)

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        response = await self._client.request(method, path, json=json)
        response.raise_for_status()
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    # Users & auth

    async def register(self, name: str, email: str, password: str) -> dict[str, Any]:
        return await self._request(
            "POST", "/api/user", {"name": name, "email": email, "password": password}
        )

    async def login(self, email: str, password: str) -> dict[str, Any]:
        return await self._request("POST", "/api/auth", {"email": email, "password": password})

    async def get_auth_user(self) -> dict[str, Any]:
        return await self._request("GET", "/api/auth")

    # Profiles

    async def get_profiles(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/profile")

    async def get_my_profile(self) -> dict[str, Any]:
        return await self._request("GET", "/api/profile/me")

    async def get_profile_by_user(self, user_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/api/profile/user/{user_id}")

    async def get_profile(self, profile_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/api/profile/{profile_id}")

    async def upsert_profile(self, fields: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/api/profile", fields)

    async def delete_profile(self) -> None:
        await self._request("DELETE", "/api/profile")

    async def add_experience(self, fields: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/api/profile/experience", fields)

    async def delete_experience(self, experience_id: str) -> dict[str, Any]:
        return await self._request("DELETE", f"/api/profile/experience/{experience_id}")

    async def add_education(self, fields: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/api/profile/education", fields)

    async def delete_education(self, education_id: str) -> dict[str, Any]:
        return await self._request("DELETE", f"/api/profile/education/{education_id}")

    async def get_github_repos(self, username: str) -> list[dict[str, Any]]:
        return await self._request("GET", f"/api/profile/github/{username}")

    # Posts

    async def get_posts(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/post")

    async def get_post(self, post_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/api/post/{post_id}")

    async def add_post(self, text: str) -> dict[str, Any]:
        return await self._request("POST", "/api/post", {"text": text})

    async def delete_post(self, post_id: str) -> dict[str, Any]:
        return await self._request("DELETE", f"/api/post/{post_id}")

    async def like_post(self, post_id: str) -> list[dict[str, Any]]:
        return await self._request("POST", f"/api/post/like/{post_id}")

    async def unlike_post(self, post_id: str) -> list[dict[str, Any]]:
        return await self._request("DELETE", f"/api/post/like/{post_id}")

    async def add_comment(self, post_id: str, text: str) -> list[dict[str, Any]]:
        return await self._request("POST", f"/api/post/comment/{post_id}", {"text": text})

    async def delete_comment(self, post_id: str, comment_id: str) -> list[dict[str, Any]]:
        return await self._request("DELETE", f"/api/post/comment/{post_id}/{comment_id}")
