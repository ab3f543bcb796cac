from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

SectionLayout = Literal["centered", "two-column", "grid", "feature-left", "feature-right"]
ContrastLevel = Literal["high", "medium", "low"]
Spacing = Literal["compact", "generous"]
TrustEmphasis = Literal["subtle", "high"]


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ImageSpec(_WireModel):
    purpose: str
    description: str


class SectionContent(_WireModel):
    headline: str
    description: str
    bullets: tuple[str, ...] | None = None
    cta: str | None = None
    ribbon: str | None = Field(default=None, description="Short badge text, e.g. 'Best Seller'")
    image: ImageSpec | None = None

    @field_validator("headline", "description")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class PageSection(_WireModel):
    id: str = Field(min_length=1)
    type: str
    layout: SectionLayout
    content: SectionContent
    is_locked: bool = False


class DesignHints(_WireModel):
    visual_style: str
    contrast_level: ContrastLevel
    spacing: Spacing
    trust_emphasis: TrustEmphasis


class LandingPageBlueprint(_WireModel):
    primary_intent: str
    design_hints: DesignHints
    sections: tuple[PageSection, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _unique_section_ids(self) -> "LandingPageBlueprint":
        seen: set[str] = set()
        for section in self.sections:
            if section.id in seen:
                raise ValueError(f"duplicate section id: {section.id}")
            seen.add(section.id)
        return self

    def get_section(self, section_id: str) -> PageSection | None:
        return next((section for section in self.sections if section.id == section_id), None)

    def section_ids(self) -> list[str]:
        return [section.id for section in self.sections]


__all__ = [
    "ContrastLevel",
    "DesignHints",
    "ImageSpec",
    "LandingPageBlueprint",
    "PageSection",
    "SectionContent",
    "SectionLayout",
    "Spacing",
    "TrustEmphasis",
]
