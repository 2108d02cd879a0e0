import json
from unittest.mock import MagicMock

import pytest
import requests

from app.clients.dashboard import (
    DashboardApiError,
    DashboardClient,
    DashboardForbidden,
    DashboardUnauthorized,
)
from app.schemas.dashboard import AdminMetrics, AgentMetrics, Preferences, Role, UserMetrics

BASE = "http://dashboard.test"


def _response(status, body=None):
    resp = requests.Response()
    resp.status_code = status
    resp._content = json.dumps(body).encode("utf-8") if body is not None else b""
    resp.headers["Content-Type"] = "application/json"
    return resp


def _client(*responses):
    session = MagicMock()
    session.request.side_effect = list(responses)
    return DashboardClient(BASE + "/", "tok", session=session, timeout=5), session


def test_get_dashboard_admin():
    body = {
        "role": "admin",
        "title": "Admin Dashboard",
        "widgets": [{"id": "users"}],
        "navigation": [{"href": "/admin"}],
        "metrics": {"totalUsers": 10},
    }
    client, session = _client(_response(200, body))

    dash = client.get_dashboard("admin")

    assert dash.role is Role.admin
    assert dash.title == "Admin Dashboard"
    assert dash.metrics == {"totalUsers": 10}
    session.request.assert_called_once_with(
        "GET",
        f"{BASE}/api/dashboard/admin",
        headers={"Authorization": "Bearer tok", "Content-Type": "application/json"},
        json=None,
        timeout=5,
    )


@pytest.mark.parametrize("role", ["agent", "user"])
def test_get_dashboard_without_title(role):
    client, _ = _client(_response(200, {"role": role, "widgets": [], "navigation": []}))
    dash = client.get_dashboard(role)
    assert dash.role.value == role
    assert dash.title is None


def test_unknown_role_is_rejected_locally():
    client, session = _client()
    with pytest.raises(ValueError):
        client.get_dashboard("superuser")
    session.request.assert_not_called()


@pytest.mark.parametrize("role,body,model", [
    ("admin", {"totalUsers": 5, "activeListings": 7}, AdminMetrics),
    ("agent", {"activeListings": 3, "commissionEarned": 1250.5}, AgentMetrics),
    ("user", {"savedSearches": 2}, UserMetrics),
])
def test_metrics_by_role(role, body, model):
    client, session = _client(_response(200, body))
    metrics = client.get_dashboard_metrics(role)
    assert isinstance(metrics, model)
    assert metrics.model_dump(by_alias=True) == body
    assert session.request.call_args.args[1] == f"{BASE}/api/dashboard/{role}/metrics"


def test_401_and_403_are_distinct():
    client, _ = _client(_response(401, {"error": "unauthenticated"}), _response(403, {"error": "forbidden"}))

    with pytest.raises(DashboardUnauthorized) as unauth:
        client.get_dashboard("admin")
    assert unauth.value.status_code == 401

    with pytest.raises(DashboardForbidden) as forbidden:
        client.get_dashboard("admin")
    assert forbidden.value.status_code == 403


def test_other_errors():
    client, _ = _client(_response(500, {"error": "boom"}))
    with pytest.raises(DashboardApiError) as err:
        client.get_user_role()
    assert err.value.status_code == 500
    assert not isinstance(err.value, (DashboardUnauthorized, DashboardForbidden))


def test_get_user_role():
    body = {"id": "user-123", "name": "Ana", "permissions": ["read"], "dashboardPath": "/dashboard/user"}
    client, _ = _client(_response(200, body))
    info = client.get_user_role()
    assert info.id == "user-123"
    assert info.dashboard_path == "/dashboard/user"


def test_update_user_role_body():
    client, session = _client(_response(200, {}), _response(200, {}))

    client.update_user_role("user-123", "agent", reason="User requested agent role")
    client.update_user_role("user-123", Role.admin)

    first, second = session.request.call_args_list
    assert first.args == ("PUT", f"{BASE}/api/user/role")
    assert first.kwargs["json"] == {"userId": "user-123", "newRole": "agent", "reason": "User requested agent role"}
    assert second.kwargs["json"] == {"userId": "user-123", "newRole": "admin"}


def test_update_user_role_forbidden():
    client, _ = _client(_response(403))
    with pytest.raises(DashboardForbidden):
        client.update_user_role("user-123", "admin")


def test_preferences_round_trip():
    body = {"theme": "dark", "language": "en", "notifications": True, "dashboardLayout": "grid", "itemsPerPage": 20}
    client, session = _client(_response(200, body), _response(200, body))

    prefs = client.get_preferences()
    assert prefs.items_per_page == 20
    assert prefs.dashboard_layout == "grid"

    client.update_preferences(prefs)
    put = session.request.call_args
    assert put.args == ("PUT", f"{BASE}/api/user/preferences")
    assert put.kwargs["json"] == body


def test_preferences_validation():
    with pytest.raises(ValueError):
        Preferences(theme="dark", language="en", notifications=True, dashboard_layout="grid", items_per_page=0)
