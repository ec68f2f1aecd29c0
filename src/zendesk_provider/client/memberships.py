"""Group and organization membership methods for ZendeskClient.

Memberships are immutable: there is no update endpoint, a change means
deleting the membership and creating a new one.
"""
from typing import List

from zendesk_provider.exceptions import ZendeskError, ZendeskAPIError
from zendesk_provider.models import GroupMembership, OrganizationMembership


class MembershipMixin:
    """Mixin providing membership list/get/create/delete methods.

    ref: https://developer.zendesk.com/api-reference/ticketing/groups/group_memberships/
    ref: https://developer.zendesk.com/api-reference/ticketing/organizations/organization_memberships/
    """

    def get_group_memberships(self) -> List[GroupMembership]:
        try:
            items = self._list_all("/group_memberships.json", "group_memberships")
            return [GroupMembership.model_validate(m) for m in items]
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to list group memberships: {str(e)}")

    def get_group_membership(self, membership_id: int) -> GroupMembership:
        try:
            data = self._get_json(f"/group_memberships/{membership_id}.json")
            return GroupMembership.model_validate(data.get('group_membership') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to get group membership {membership_id}: {str(e)}")

    def create_group_membership(self, membership: GroupMembership) -> GroupMembership:
        try:
            data = self._post_json(
                "/group_memberships.json", {"group_membership": membership.to_payload()}
            )
            return GroupMembership.model_validate(data.get('group_membership') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to create group membership: {str(e)}")

    def delete_group_membership(self, membership_id: int) -> None:
        try:
            self._delete(f"/group_memberships/{membership_id}.json")
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to delete group membership {membership_id}: {str(e)}")

    def get_organization_memberships(self) -> List[OrganizationMembership]:
        try:
            items = self._list_all("/organization_memberships.json", "organization_memberships")
            return [OrganizationMembership.model_validate(m) for m in items]
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to list organization memberships: {str(e)}")

    def get_organization_membership(self, membership_id: int) -> OrganizationMembership:
        try:
            data = self._get_json(f"/organization_memberships/{membership_id}.json")
            return OrganizationMembership.model_validate(data.get('organization_membership') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(
                f"Failed to get organization membership {membership_id}: {str(e)}"
            )

    def create_organization_membership(
        self, membership: OrganizationMembership
    ) -> OrganizationMembership:
        try:
            data = self._post_json(
                "/organization_memberships.json",
                {"organization_membership": membership.to_payload()},
            )
            return OrganizationMembership.model_validate(data.get('organization_membership') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to create organization membership: {str(e)}")

    def delete_organization_membership(self, membership_id: int) -> None:
        try:
            self._delete(f"/organization_memberships/{membership_id}.json")
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(
                f"Failed to delete organization membership {membership_id}: {str(e)}"
            )
