"""OpenAPI customization utilities.

Enriches the generated schema with:
- Tags metadata
- A documented 429 response on every rate-limited (``/api``) operation

This keeps documentation concerns decoupled from the app factory.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI

TAGS_METADATA = [
    {
        "name": "Audit",
        "description": "Mock contract audits and audit result lookup.",
    },
    {
        "name": "Integrations",
        "description": "Mocked Audityzer and AuditorSEC engine endpoints.",
    },
    {
        "name": "Health",
        "description": "Liveness checks.",
    },
]


def apply_openapi_customizations(app: FastAPI, *, api_prefix: str = "/api") -> None:
    """Patch FastAPI's OpenAPI generation to add tags and throttling docs."""

    original_openapi = app.openapi

    def custom_openapi() -> Dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        schema = original_openapi()

        tags = schema.setdefault("tags", [])
        existing_tag_names = {t.get("name") for t in tags}
        for tag in TAGS_METADATA:
            if tag["name"] not in existing_tag_names:
                tags.append(tag)

        for path, methods in schema.get("paths", {}).items():
            if not path.startswith(api_prefix + "/"):
                continue
            for method_obj in methods.values():
                if isinstance(method_obj, dict):
                    method_obj.setdefault("responses", {}).setdefault(
                        "429",
                        {"description": "Too many requests from this IP"},
                    )

        app.openapi_schema = schema
        return schema

    app.openapi = custom_openapi  # type: ignore[assignment]
