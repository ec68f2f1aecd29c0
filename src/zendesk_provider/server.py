import asyncio
import json
import logging
import os
from typing import Any, Callable, TypeVar

from cachetools.func import ttl_cache
from dotenv import load_dotenv
from mcp.server import InitializationOptions, NotificationOptions
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from pydantic import AnyUrl

from zendesk_provider.client import ZendeskClient
from zendesk_provider.data_sources import DATA_SOURCES
from zendesk_provider.provider import Provider
from zendesk_provider.resources import RESOURCES

LOGGER_NAME = "zendesk-provider"
logger = logging.getLogger(LOGGER_NAME)

REQUIRED_ENV_VARS: dict[str, str] = {
    "ZENDESK_SUBDOMAIN": "Zendesk subdomain used for API calls",
    "ZENDESK_EMAIL": "Admin email associated with the API token",
    "ZENDESK_API_KEY": "Zendesk API token with admin permissions",
}

T = TypeVar("T")


async def run_client_call(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run blocking Zendesk client calls without stalling the event loop."""
    return await asyncio.to_thread(func, *args, **kwargs)


def load_settings() -> dict[str, str]:
    """Validate required environment variables and return their values."""
    missing: list[str] = []
    values: dict[str, str] = {}

    for key, description in REQUIRED_ENV_VARS.items():
        value = os.getenv(key)
        if value:
            values[key] = value
        else:
            missing.append(f"{key} ({description})")

    if missing:
        detail = ", ".join(missing)
        raise RuntimeError(
            f"Missing required environment variables: {detail}. "
            "Populate .env or export them before launching the server."
        )

    return values


load_dotenv()
_settings_cache: dict[str, str] | None = None
_zendesk_client: ZendeskClient | None = None


def get_settings() -> dict[str, str]:
    """Return cached settings, loading them on first use."""
    global _settings_cache
    if _settings_cache is None:
        _settings_cache = load_settings()
    return _settings_cache


def get_zendesk_client() -> ZendeskClient:
    """Instantiate the Zendesk client lazily so imports succeed in test environments."""
    global _zendesk_client
    if _zendesk_client is None:
        settings = get_settings()
        _zendesk_client = ZendeskClient(
            subdomain=settings["ZENDESK_SUBDOMAIN"],
            email=settings["ZENDESK_EMAIL"],
            token=settings["ZENDESK_API_KEY"],
        )
    return _zendesk_client


def _reset_client_cache_for_tests() -> None:
    """Clear cached settings/client; intended for use in unit tests."""
    global _settings_cache, _zendesk_client
    _settings_cache = None
    _zendesk_client = None
    get_cached_locales.cache_clear()


server = Server("Zendesk Provider")

_RESOURCE_TYPE = {
    "type": "string",
    "enum": sorted(RESOURCES),
    "description": "Resource type, e.g. zendesk_view",
}
_STATE = {
    "type": "object",
    "description": "Attribute values as last returned by the provider",
}


@server.list_tools()
async def handle_list_tools() -> list[types.Tool]:
    """List available provider tools"""
    return [
        types.Tool(
            name="get_provider_schema",
            description="Describe every resource and data source type with its attributes",
            inputSchema={
                "type": "object",
                "properties": {
                    "type": {
                        "type": "string",
                        "description": "Only describe this resource or data source type",
                    },
                },
            }
        ),
        types.Tool(
            name="create_resource",
            description="Create a Zendesk object from a resource configuration",
            inputSchema={
                "type": "object",
                "properties": {
                    "type": _RESOURCE_TYPE,
                    "config": {"type": "object", "description": "Attribute values"},
                },
                "required": ["type", "config"],
            }
        ),
        types.Tool(
            name="read_resource",
            description="Refresh the state of a managed resource from Zendesk",
            inputSchema={
                "type": "object",
                "properties": {
                    "type": _RESOURCE_TYPE,
                    "id": {"type": "string", "description": "Resource id"},
                    "state": _STATE,
                },
                "required": ["type", "id"],
            }
        ),
        types.Tool(
            name="update_resource",
            description=(
                "Apply a new configuration to a managed resource. "
                "Changing a force_new attribute replaces the resource."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "type": _RESOURCE_TYPE,
                    "id": {"type": "string", "description": "Resource id"},
                    "config": {"type": "object", "description": "New attribute values"},
                    "prior_state": _STATE,
                },
                "required": ["type", "id", "config"],
            }
        ),
        types.Tool(
            name="delete_resource",
            description="Delete a managed resource",
            inputSchema={
                "type": "object",
                "properties": {
                    "type": _RESOURCE_TYPE,
                    "id": {"type": "string", "description": "Resource id"},
                    "state": _STATE,
                },
                "required": ["type", "id"],
            }
        ),
        types.Tool(
            name="import_resource",
            description="Bring an existing Zendesk object under management by id",
            inputSchema={
                "type": "object",
                "properties": {
                    "type": _RESOURCE_TYPE,
                    "id": {"type": "string", "description": "Id of the existing object"},
                },
                "required": ["type", "id"],
            }
        ),
        types.Tool(
            name="read_data_source",
            description="Read a data source (locales, tags, satisfaction ratings, webhook, OAuth clients)",
            inputSchema={
                "type": "object",
                "properties": {
                    "type": {
                        "type": "string",
                        "enum": sorted(DATA_SOURCES),
                        "description": "Data source type, e.g. zendesk_locales",
                    },
                    "config": {"type": "object", "description": "Data source arguments"},
                },
                "required": ["type"],
            }
        ),
    ]


@server.call_tool()
async def handle_call_tool(
        name: str,
        arguments: dict[str, Any] | None
) -> list[types.TextContent]:
    """Handle provider tool execution requests"""
    try:
        from zendesk_provider.handlers import TOOL_HANDLERS

        handler = TOOL_HANDLERS.get(name)
        if handler is None:
            raise ValueError(f"Unknown tool: {name}")

        client = get_zendesk_client()
        return await handler(client, arguments)
    except Exception as e:
        logger.error(f"Tool {name} failed: {e}")
        return [types.TextContent(
            type="text",
            text=f"Error: {str(e)}"
        )]


@server.list_resources()
async def handle_list_resources() -> list[types.Resource]:
    logger.debug("Handling list_resources request")
    return [
        types.Resource(
            uri=AnyUrl("zendesk://provider-schema"),
            name="Zendesk Provider Schema",
            description="Resource and data source types with their attributes",
            mimeType="application/json",
        ),
        types.Resource(
            uri=AnyUrl("zendesk://locales"),
            name="Zendesk Locales",
            description="Locales translated for the account",
            mimeType="application/json",
        ),
    ]


@ttl_cache(ttl=3600)
def get_cached_locales():
    client = get_zendesk_client()
    return [loc.model_dump(mode="json", exclude_none=True) for loc in client.get_locales()]


@server.read_resource()
async def handle_read_resource(uri: AnyUrl) -> str:
    logger.debug(f"Handling read_resource request for URI: {uri}")
    if uri.scheme != "zendesk":
        logger.error(f"Unsupported URI scheme: {uri.scheme}")
        raise ValueError(f"Unsupported URI scheme: {uri.scheme}")

    path = str(uri).replace("zendesk://", "").rstrip("/")
    if path == "provider-schema":
        return json.dumps(Provider(None).schema(), indent=2)
    if path != "locales":
        logger.error(f"Unknown resource path: {path}")
        raise ValueError(f"Unknown resource path: {path}")

    try:
        locales = await run_client_call(get_cached_locales)
        return json.dumps({"locales": locales, "metadata": {"count": len(locales)}}, indent=2)
    except Exception as e:
        logger.error(f"Error fetching locales: {e}")
        raise


def configure_logging() -> None:
    """Configure package logging without overriding host configuration."""
    if logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False


async def main():
    configure_logging()
    logger.info("zendesk provider server started")
    # Run the server using stdin/stdout streams
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream=read_stream,
            write_stream=write_stream,
            initialization_options=InitializationOptions(
                server_name="Zendesk Provider",
                server_version="0.1.0",
                capabilities=server.get_capabilities(
                    notification_options=NotificationOptions(),
                    experimental_capabilities={},
                ),
            ),
        )


def cli():
    asyncio.run(main())


if __name__ == "__main__":
    cli()
