"""User methods for ZendeskClient."""
from typing import List

from zendesk_provider.exceptions import ZendeskError, ZendeskAPIError
from zendesk_provider.models import User


class UserMixin:
    """Mixin providing user CRUD methods.

    ref: https://developer.zendesk.com/api-reference/ticketing/users/users/
    """

    def get_users(self) -> List[User]:
        try:
            return [User.model_validate(u) for u in self._list_all("/users.json", "users")]
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to list users: {str(e)}")

    def get_user(self, user_id: int) -> User:
        try:
            data = self._get_json(f"/users/{user_id}.json")
            return User.model_validate(data.get('user') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to get user {user_id}: {str(e)}")

    def create_user(self, user: User) -> User:
        try:
            data = self._post_json("/users.json", {"user": user.to_payload()})
            return User.model_validate(data.get('user') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to create user: {str(e)}")

    def update_user(self, user_id: int, user: User) -> User:
        try:
            data = self._put_json(f"/users/{user_id}.json", {"user": user.to_payload()})
            return User.model_validate(data.get('user') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to update user {user_id}: {str(e)}")

    def delete_user(self, user_id: int) -> None:
        # Zendesk soft-deletes: the user is kept with active=false
        try:
            self._delete(f"/users/{user_id}.json")
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to delete user {user_id}: {str(e)}")
