"""
HTTP client for the Craftfolio API.
"""
import logging
from typing import List, Optional
import httpx
from craftfolio.core.config import settings
from craftfolio.core.errors import NetworkError, error_for_status
from craftfolio.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from craftfolio.schemas.user import UserResponse, UserUpdate

logger = logging.getLogger(__name__)


def _error_message(response: httpx.Response) -> str:
    """Pull the error message out of a failed response."""
    try:
        data = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    detail = data.get("detail") if isinstance(data, dict) else None
    if isinstance(detail, list):
        # FastAPI request validation errors
        return "; ".join(str(item.get("msg", item)) for item in detail)
    return str(detail or response.reason_phrase)


class ApiClient:
    """
    Thin wrapper over the REST endpoints.

    Every failure is raised as a CraftfolioError subclass; transport
    problems become NetworkError.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http: Optional[httpx.Client] = None
    ):
        self.http = http or httpx.Client(
            base_url=base_url or settings.API_BASE_URL,
            timeout=timeout or settings.API_TIMEOUT
        )

    def close(self) -> None:
        self.http.close()

    def _request(self, method: str, url: str, token: Optional[str] = None, **kwargs) -> httpx.Response:
        headers = kwargs.pop("headers", {})
        if token:
            headers["Authorization"] = f"Bearer {token}"
        try:
            response = self.http.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise NetworkError("Could not reach the server. Please try again.")
        if response.is_error:
            message = _error_message(response)
            logger.debug(f"{method} {url} -> {response.status_code}: {message}")
            raise error_for_status(response.status_code, message)
        return response

    # Auth

    def register(self, username: str, password: str, email: Optional[str] = None) -> str:
        params = {"username": username, "password": password}
        if email:
            params["email"] = email
        return self._request("POST", "/api/auth/register", params=params).text

    def login(self, username: str, password: str) -> str:
        response = self._request(
            "POST", "/api/auth/login",
            params={"username": username, "password": password}
        )
        return response.text.strip()

    # Profile

    def get_me(self, token: str) -> UserResponse:
        return UserResponse(**self._request("GET", "/api/user/me", token).json())

    def update_me(self, token: str, patch: UserUpdate) -> UserResponse:
        response = self._request(
            "PUT", "/api/user/me", token,
            json=patch.model_dump(mode="json", exclude_unset=True)
        )
        return UserResponse(**response.json())

    # Projects

    def list_projects(
        self,
        token: str,
        owner_id: Optional[str] = None,
        q: Optional[str] = None,
        status: Optional[str] = None,
        tags: Optional[List[str]] = None
    ) -> List[ProjectResponse]:
        params = {"owner_id": owner_id, "q": q, "status": status, "tags": tags or None}
        params = {k: v for k, v in params.items() if v}
        response = self._request("GET", "/api/projects", token, params=params)
        return [ProjectResponse(**item) for item in response.json()]

    def get_project(self, token: str, project_id: str) -> ProjectResponse:
        return ProjectResponse(**self._request("GET", f"/api/projects/{project_id}", token).json())

    def create_project(self, token: str, data: ProjectCreate) -> ProjectResponse:
        response = self._request(
            "POST", "/api/projects", token,
            json=data.model_dump(mode="json", exclude_unset=True)
        )
        return ProjectResponse(**response.json())

    def update_project(self, token: str, project_id: str, patch: ProjectUpdate) -> ProjectResponse:
        response = self._request(
            "PUT", f"/api/projects/{project_id}", token,
            json=patch.model_dump(mode="json", exclude_unset=True)
        )
        return ProjectResponse(**response.json())

    def delete_project(self, token: str, project_id: str) -> None:
        self._request("DELETE", f"/api/projects/{project_id}", token)
