"""
User preferences, custom tags and admin permission management.
"""

from typing import Any, Dict, List, Union

from newsdesk.client.api.base import BaseApiClient

UserId = Union[int, str]


class UserApi(BaseApiClient):
    """Client for the /user/ and /api/admin/ endpoints"""

    def get_permissions(self) -> Any:
        """Get the current user's permissions and preferences"""
        return self.request("/user/permissions/")

    def update_preferences(self, preferences: Dict[str, Any]) -> Any:
        return self.request("/user/permissions/", method="POST", body=preferences)

    def get_custom_tags(self) -> Any:
        return self.request("/user/custom-tags/")

    def create_custom_tag(self, tag_data: Dict[str, Any]) -> Any:
        return self.request("/user/custom-tags/", method="POST", body=tag_data)

    def update_custom_tag(self, tag_id: Union[int, str], tag_data: Dict[str, Any]) -> Any:
        return self.request(f"/user/custom-tags/{tag_id}/", method="PUT", body=tag_data)

    def delete_custom_tag(self, tag_id: Union[int, str]) -> Any:
        return self.request(f"/user/custom-tags/{tag_id}/", method="DELETE")

    # Admin

    def get_all_users_permissions(self) -> Any:
        return self.request("/api/admin/users/permissions/")

    def update_user_permissions(self, user_id: UserId, permissions: Dict[str, Any]) -> Any:
        return self.request(f"/api/admin/users/{user_id}/permissions/", method="PUT", body=permissions)

    def bulk_update_permissions(self, updates: List[Dict[str, Any]]) -> Any:
        """
        Update several users at once.

        Args:
            updates: One ``{"user_id": ..., <permission>: ...}`` entry per user
        """
        return self.request("/api/admin/users/bulk-permissions/", method="POST", body={"updates": updates})

    def get_admin_dashboard_stats(self) -> Any:
        return self.request("/api/admin/dashboard/stats/")
