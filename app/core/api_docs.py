"""
Static Swagger 2.0 document served at /api-docs.json.

Definitions are generated from the pydantic schema models.
"""
from functools import lru_cache
from typing import Any, Dict

from app.schemas import (
    Config,
    DataContainer,
    Entity,
    Example,
    Intent,
    Message,
    ParseResponse,
    Payload,
)

REF_TEMPLATE = "#/definitions/{model}"

DEFINITION_MODELS = (Entity, Example, DataContainer, Payload, Message, Intent, ParseResponse, Config)


def _ref(name: str) -> Dict[str, str]:
    return {"$ref": REF_TEMPLATE.format(model=name)}


def _definitions() -> Dict[str, Any]:
    definitions: Dict[str, Any] = {}
    for model in DEFINITION_MODELS:
        schema = model.model_json_schema(ref_template=REF_TEMPLATE)
        schema.pop("$defs", None)
        definitions[model.__name__] = schema
    return definitions


@lru_cache()
def build_api_docs() -> Dict[str, Any]:
    """Assemble the API document."""
    return {
        "swagger": "2.0",
        "info": {"title": "rasa-server", "version": "1.0.0"},
        "basePath": "/rasa-server",
        "paths": {
            "/train/{workspace_id}": {
                "post": {
                    "description": "Deploy training examples to RASA.",
                    "produces": ["application/json"],
                    "parameters": [
                        {
                            "name": "workspace_id",
                            "description": "workspace id to use as name of model",
                            "in": "path",
                            "required": True,
                            "type": "string",
                        },
                        {
                            "name": "dataObject",
                            "description": "Training payload",
                            "in": "body",
                            "required": True,
                            "schema": _ref("Payload"),
                        },
                    ],
                    "responses": {
                        "200": {"description": "Successful request"},
                        "500": {"description": "Error posting workspace to RASA"},
                    },
                }
            },
            "/parse": {
                "post": {
                    "description": "Send a message to RASA.",
                    "produces": ["application/json"],
                    "parameters": [
                        {
                            "name": "message",
                            "description": "message payload",
                            "in": "body",
                            "required": True,
                            "schema": _ref("Message"),
                        }
                    ],
                    "responses": {
                        "200": {"description": "Successful request", "schema": _ref("ParseResponse")},
                        "500": {"description": "Invalid request"},
                    },
                }
            },
            "/config": {
                "post": {
                    "description": "Update the configuration of this proxy.",
                    "produces": ["application/json"],
                    "parameters": [
                        {
                            "name": "configObject",
                            "description": "configuration object",
                            "in": "body",
                            "required": True,
                            "schema": _ref("Config"),
                        }
                    ],
                    "responses": {
                        "200": {"description": "Successful request"},
                        "500": {"description": "Error updating config"},
                    },
                }
            },
        },
        "definitions": _definitions(),
    }
