"""Tool handler registry."""
from zendesk_provider.handlers import tools

# Registry mapping tool names to handler functions
TOOL_HANDLERS = {
    "get_provider_schema": tools.handle_get_provider_schema,
    "create_resource": tools.handle_create_resource,
    "read_resource": tools.handle_read_resource,
    "update_resource": tools.handle_update_resource,
    "delete_resource": tools.handle_delete_resource,
    "import_resource": tools.handle_import_resource,
    "read_data_source": tools.handle_read_data_source,
}
