"""Read-only data source types, keyed by type name."""
from typing import Dict

from zendesk_provider.data_sources import (
    locales,
    oauth_clients,
    satisfaction_ratings,
    tags,
    webhook,
)
from zendesk_provider.schema import Resource

DATA_SOURCES: Dict[str, Resource] = {
    ds.name: ds
    for ds in (
        locales.DATA_SOURCE,
        tags.DATA_SOURCE,
        satisfaction_ratings.DATA_SOURCE,
        webhook.DATA_SOURCE,
        oauth_clients.DATA_SOURCE,
    )
}

__all__ = ['DATA_SOURCES']
