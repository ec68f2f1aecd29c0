"""zendesk_webhook data source.

ref: https://developer.zendesk.com/api-reference/webhooks/webhooks-api/webhooks/
"""
from zendesk_provider.resource_data import ResourceData, set_schema_fields
from zendesk_provider.schema import Attribute, Resource, computed_string, string_attr


def read_webhook(d: ResourceData, client) -> None:
    webhook_id = d.get("id") or d.id
    webhook = client.get_webhook(str(webhook_id))

    authentication = []
    if webhook.authentication is not None:
        authentication.append({
            "type": webhook.authentication.type,
            "data": webhook.authentication.data or {},
            "add_position": webhook.authentication.add_position,
        })

    d.set_id(webhook.id or str(webhook_id))
    set_schema_fields(d, {
        "id": webhook.id or str(webhook_id),
        "authentication": authentication,
        "description": webhook.description,
        "endpoint": webhook.endpoint,
        "http_method": webhook.http_method,
        "name": webhook.name,
        "request_format": webhook.request_format,
        "status": webhook.status,
        "subscriptions": list(webhook.subscriptions),
        "created_at": webhook.created_at,
        "created_by": webhook.created_by,
        "updated_at": webhook.updated_at,
        "updated_by": webhook.updated_by,
    })


DATA_SOURCE = Resource(
    name="zendesk_webhook",
    description="Looks up a webhook by id.",
    schema={
        "id": string_attr("The id of the webhook.", required=True),
        "authentication": Attribute(
            type="list",
            computed=True,
            elem={
                "type": Attribute(type="string", computed=True),
                "data": Attribute(type="map", computed=True, sensitive=True),
                "add_position": Attribute(type="string", computed=True),
            },
        ),
        "description": computed_string("Webhook description."),
        "endpoint": computed_string("The destination URL."),
        "http_method": computed_string("HTTP method used for the webhook's requests."),
        "name": computed_string("Webhook name."),
        "request_format": computed_string("The format of the data the webhook sends."),
        "status": computed_string("Current status of the webhook: active or inactive."),
        "subscriptions": Attribute(type="set", computed=True, elem="string"),
        "created_at": computed_string("When the webhook was created."),
        "created_by": computed_string("Id of the user who created the webhook."),
        "updated_at": computed_string("When the webhook was last updated."),
        "updated_by": computed_string("Id of the user who last updated the webhook."),
    },
    read=read_webhook,
    importable=False,
)
