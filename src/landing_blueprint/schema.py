"""Response schemas handed to the model as an output constraint.

The model treats these as a strong hint only; responses still go through
``json_repair`` and pydantic validation before anyone trusts them.
"""

from __future__ import annotations

from typing import Any, Mapping

SECTION_LAYOUTS: tuple[str, ...] = (
    "centered",
    "two-column",
    "grid",
    "feature-left",
    "feature-right",
)

SECTION_CONTENT_SCHEMA: Mapping[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "headline": {"type": "STRING", "description": "Concise headline"},
        "description": {"type": "STRING", "description": "1-2 sentences explaining value"},
        "bullets": {"type": "ARRAY", "items": {"type": "STRING"}},
        "cta": {"type": "STRING", "description": "Short Call to Action"},
        # Keep this short, longer wording makes the model echo its own checks into the badge.
        "ribbon": {"type": "STRING", "description": "Short badge text. Example: 'Best Seller'"},
        "image": {
            "type": "OBJECT",
            "properties": {
                "purpose": {"type": "STRING"},
                "description": {"type": "STRING"},
            },
            "required": ["purpose", "description"],
        },
    },
    "required": ["headline", "description"],
}

SECTION_RESPONSE_SCHEMA: Mapping[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "id": {"type": "STRING"},
        "type": {"type": "STRING"},
        "layout": {"type": "STRING", "enum": list(SECTION_LAYOUTS)},
        "content": SECTION_CONTENT_SCHEMA,
    },
    "required": ["id", "type", "layout", "content"],
}

DESIGN_HINTS_SCHEMA: Mapping[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "visualStyle": {"type": "STRING"},
        "contrastLevel": {"type": "STRING", "enum": ["high", "medium", "low"]},
        "spacing": {"type": "STRING", "enum": ["compact", "generous"]},
        "trustEmphasis": {"type": "STRING", "enum": ["subtle", "high"]},
    },
    "required": ["visualStyle", "contrastLevel", "spacing", "trustEmphasis"],
}

BLUEPRINT_RESPONSE_SCHEMA: Mapping[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "primaryIntent": {"type": "STRING"},
        "designHints": DESIGN_HINTS_SCHEMA,
        "sections": {"type": "ARRAY", "items": SECTION_RESPONSE_SCHEMA},
    },
    "required": ["primaryIntent", "designHints", "sections"],
}


__all__ = [
    "BLUEPRINT_RESPONSE_SCHEMA",
    "DESIGN_HINTS_SCHEMA",
    "SECTION_CONTENT_SCHEMA",
    "SECTION_LAYOUTS",
    "SECTION_RESPONSE_SCHEMA",
]
