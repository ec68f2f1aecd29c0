"""Individual tool handler functions."""
import json
from typing import Any
from mcp import types

from zendesk_provider.provider import Provider
from zendesk_provider.server import run_client_call


def _json_response(data: Any) -> list[types.TextContent]:
    """Helper to format JSON response."""
    return [types.TextContent(type="text", text=json.dumps(data, indent=2))]


def _require_args(arguments: dict[str, Any] | None, *required_keys: str) -> None:
    """Helper to validate required arguments."""
    if not arguments:
        raise ValueError("Missing arguments")
    missing = [key for key in required_keys if key not in arguments or arguments[key] is None]
    if missing:
        raise ValueError(f"Missing required arguments: {', '.join(missing)}")


async def handle_get_provider_schema(client: Any, arguments: dict[str, Any] | None) -> list[types.TextContent]:
    """Handle get_provider_schema tool."""
    schema = Provider(client).schema()
    type_name = (arguments or {}).get("type")
    if type_name:
        found = schema["resources"].get(type_name) or schema["data_sources"].get(type_name)
        if found is None:
            raise ValueError(f"Unknown type: {type_name}")
        return _json_response({type_name: found})
    return _json_response(schema)


async def handle_create_resource(client: Any, arguments: dict[str, Any] | None) -> list[types.TextContent]:
    """Handle create_resource tool."""
    _require_args(arguments, "type", "config")
    result = await run_client_call(Provider(client).create, arguments["type"], arguments["config"])
    return _json_response(result)


async def handle_read_resource(client: Any, arguments: dict[str, Any] | None) -> list[types.TextContent]:
    """Handle read_resource tool."""
    _require_args(arguments, "type", "id")
    result = await run_client_call(
        Provider(client).read,
        arguments["type"],
        str(arguments["id"]),
        arguments.get("state"),
    )
    return _json_response(result)


async def handle_update_resource(client: Any, arguments: dict[str, Any] | None) -> list[types.TextContent]:
    """Handle update_resource tool."""
    _require_args(arguments, "type", "id", "config")
    result = await run_client_call(
        Provider(client).update,
        arguments["type"],
        str(arguments["id"]),
        arguments["config"],
        arguments.get("prior_state"),
    )
    return _json_response(result)


async def handle_delete_resource(client: Any, arguments: dict[str, Any] | None) -> list[types.TextContent]:
    """Handle delete_resource tool."""
    _require_args(arguments, "type", "id")
    result = await run_client_call(
        Provider(client).delete,
        arguments["type"],
        str(arguments["id"]),
        arguments.get("state"),
    )
    return _json_response(result)


async def handle_import_resource(client: Any, arguments: dict[str, Any] | None) -> list[types.TextContent]:
    """Handle import_resource tool."""
    _require_args(arguments, "type", "id")
    result = await run_client_call(
        Provider(client).import_resource, arguments["type"], str(arguments["id"])
    )
    return _json_response(result)


async def handle_read_data_source(client: Any, arguments: dict[str, Any] | None) -> list[types.TextContent]:
    """Handle read_data_source tool."""
    _require_args(arguments, "type")
    result = await run_client_call(
        Provider(client).read_data_source, arguments["type"], arguments.get("config")
    )
    return _json_response(result)
