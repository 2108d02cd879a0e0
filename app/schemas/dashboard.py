from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

class Role(str, Enum):
    admin = "admin"
    agent = "agent"
    user = "user"


class _Wire(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class DashboardOut(_Wire):
    role: Role
    title: Optional[str] = None
    widgets: List[Any]
    navigation: List[Any]
    metrics: Dict[str, Any] = Field(default_factory=dict)


class AdminMetrics(_Wire):
    total_users: int = Field(..., alias="totalUsers")
    active_listings: int = Field(..., alias="activeListings")

class AgentMetrics(_Wire):
    active_listings: int = Field(..., alias="activeListings")
    commission_earned: float = Field(..., alias="commissionEarned")

class UserMetrics(_Wire):
    saved_searches: int = Field(..., alias="savedSearches")


METRICS_BY_ROLE = {
    Role.admin: AdminMetrics,
    Role.agent: AgentMetrics,
    Role.user: UserMetrics,
}


class UserRoleOut(_Wire):
    id: str
    name: str
    permissions: List[str]
    dashboard_path: str = Field(..., alias="dashboardPath")


class RoleUpdateIn(_Wire):
    user_id: str = Field(..., alias="userId")
    new_role: Role = Field(..., alias="newRole")
    reason: Optional[str] = None


class Preferences(_Wire):
    theme: str
    language: str
    notifications: bool
    dashboard_layout: str = Field(..., alias="dashboardLayout")
    items_per_page: int = Field(..., alias="itemsPerPage", ge=1)
