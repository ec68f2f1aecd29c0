"""Read-only account lookups for ZendeskClient: locales, tags, satisfaction ratings, OAuth clients."""
from typing import List

from zendesk_provider.exceptions import ZendeskError, ZendeskAPIError
from zendesk_provider.models import Locale, OAuthClient, SatisfactionRating, Tag


class LocaleMixin:
    """ref: https://developer.zendesk.com/api-reference/ticketing/account-configuration/locales/"""

    def _locale_list(self, path: str) -> List[Locale]:
        try:
            data = self._get_json(path)
            return [Locale.model_validate(loc) for loc in data.get('locales') or []]
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to list locales from {path}: {str(e)}")

    def _locale_one(self, path: str, params: dict | None = None) -> Locale:
        try:
            data = self._get_json(path, params)
            return Locale.model_validate(data.get('locale') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to get locale from {path}: {str(e)}")

    def get_locales(self) -> List[Locale]:
        """Locales translated for the account."""
        return self._locale_list("/locales.json")

    def get_agent_locales(self) -> List[Locale]:
        return self._locale_list("/locales/agent.json")

    def get_public_locales(self) -> List[Locale]:
        return self._locale_list("/locales/public.json")

    def get_locale(self, locale_id: int) -> Locale:
        return self._locale_one(f"/locales/{locale_id}.json")

    def get_current_locale(self) -> Locale:
        return self._locale_one("/locales/current.json")

    def detect_best_locale(self, accept_language: str | None = None) -> Locale:
        params = {'accept_language': accept_language} if accept_language else None
        return self._locale_one("/locales/detect_best_locale.json", params)


class TagMixin:
    """ref: https://developer.zendesk.com/api-reference/ticketing/ticket-management/tags/"""

    def get_tags(self) -> List[Tag]:
        """Most popular recent tags, in decreasing popularity."""
        try:
            return [Tag.model_validate(t) for t in self._list_all("/tags.json", "tags")]
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to list tags: {str(e)}")

    def get_tag_count(self) -> int:
        try:
            data = self._get_json("/tags/count.json")
            count = data.get('count')
            # newer accounts answer {"count": {"value": n, "refreshed_at": ...}}
            if isinstance(count, dict):
                count = count.get('value')
            return int(count or 0)
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to count tags: {str(e)}")

    def autocomplete_tags(self, name: str) -> List[Tag]:
        """Tags starting with `name`; Zendesk returns bare tag names here."""
        try:
            data = self._get_json("/autocomplete/tags.json", {'name': name})
            return [
                Tag(name=t) if isinstance(t, str) else Tag.model_validate(t)
                for t in data.get('tags') or []
            ]
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to autocomplete tags for '{name}': {str(e)}")


class SatisfactionRatingMixin:
    """ref: https://developer.zendesk.com/api-reference/ticketing/ticket-management/satisfaction_ratings/"""

    def get_satisfaction_ratings(self) -> List[SatisfactionRating]:
        try:
            items = self._list_all("/satisfaction_ratings.json", "satisfaction_ratings")
            return [SatisfactionRating.model_validate(r) for r in items]
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to list satisfaction ratings: {str(e)}")

    def get_satisfaction_rating(self, rating_id: int) -> SatisfactionRating:
        try:
            data = self._get_json(f"/satisfaction_ratings/{rating_id}.json")
            return SatisfactionRating.model_validate(data.get('satisfaction_rating') or {})
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to get satisfaction rating {rating_id}: {str(e)}")

    def get_satisfaction_rating_count(self) -> int:
        try:
            data = self._get_json("/satisfaction_ratings/count.json")
            count = data.get('count')
            if isinstance(count, dict):
                count = count.get('value')
            return int(count or 0)
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to count satisfaction ratings: {str(e)}")


class OAuthClientMixin:
    """ref: https://developer.zendesk.com/api-reference/ticketing/oauth/oauth_clients/"""

    def get_oauth_clients(self) -> List[OAuthClient]:
        try:
            items = self._list_all("/oauth/clients.json", "clients")
            return [OAuthClient.model_validate(c) for c in items]
        except Exception as e:
            if isinstance(e, ZendeskError):
                raise
            raise ZendeskAPIError(f"Failed to list OAuth clients: {str(e)}")
