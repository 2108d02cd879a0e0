"""
Client for the role-based dashboard API.

The dashboard service lives elsewhere; this module only knows its contract:

    GET  /api/dashboard/{role}            -> DashboardOut (401/403)
    GET  /api/dashboard/{role}/metrics    -> AdminMetrics | AgentMetrics | UserMetrics
    GET  /api/user/role                   -> UserRoleOut
    PUT  /api/user/role                   -> 200, 403 for non-admins
    GET  /api/user/preferences            -> Preferences
    PUT  /api/user/preferences            -> 200
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

import requests

from app.schemas.dashboard import (
    METRICS_BY_ROLE,
    AdminMetrics,
    AgentMetrics,
    DashboardOut,
    Preferences,
    Role,
    RoleUpdateIn,
    UserMetrics,
    UserRoleOut,
)

logger = logging.getLogger(__name__)


class DashboardApiError(Exception):
    def __init__(self, status_code: int, detail: str = ""):
        super().__init__(f"dashboard api returned {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail

class DashboardUnauthorized(DashboardApiError):
    pass

class DashboardForbidden(DashboardApiError):
    pass


def _raise_for_status(resp: requests.Response) -> None:
    if resp.status_code < 400:
        return
    detail = (resp.text or "")[:500]
    if resp.status_code == 401:
        raise DashboardUnauthorized(resp.status_code, detail)
    if resp.status_code == 403:
        raise DashboardForbidden(resp.status_code, detail)
    raise DashboardApiError(resp.status_code, detail)


class DashboardClient:
    def __init__(
        self,
        base_url: str,
        token: str,
        session: Optional[requests.Session] = None,
        timeout: int = 30,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    def _request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> requests.Response:
        url = f"{self.base_url}{path}"
        resp = self.session.request(method, url, headers=self.headers, json=body, timeout=self.timeout)
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        _raise_for_status(resp)
        return resp

    # ----------------------------
    # Dashboards
    # ----------------------------
    def get_dashboard(self, role: Union[Role, str]) -> DashboardOut:
        role = Role(role)
        resp = self._request("GET", f"/api/dashboard/{role.value}")
        return DashboardOut.model_validate(resp.json())

    def get_dashboard_metrics(self, role: Union[Role, str]) -> Union[AdminMetrics, AgentMetrics, UserMetrics]:
        role = Role(role)
        resp = self._request("GET", f"/api/dashboard/{role.value}/metrics")
        return METRICS_BY_ROLE[role].model_validate(resp.json())

    # ----------------------------
    # User role / preferences
    # ----------------------------
    def get_user_role(self) -> UserRoleOut:
        return UserRoleOut.model_validate(self._request("GET", "/api/user/role").json())

    def update_user_role(self, user_id: str, new_role: Union[Role, str], reason: Optional[str] = None) -> None:
        payload = RoleUpdateIn(user_id=user_id, new_role=Role(new_role), reason=reason)
        self._request("PUT", "/api/user/role", payload.model_dump(mode="json", by_alias=True, exclude_none=True))

    def get_preferences(self) -> Preferences:
        return Preferences.model_validate(self._request("GET", "/api/user/preferences").json())

    def update_preferences(self, prefs: Preferences) -> None:
        self._request("PUT", "/api/user/preferences", prefs.model_dump(mode="json", by_alias=True))
