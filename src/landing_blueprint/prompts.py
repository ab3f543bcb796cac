from __future__ import annotations

import json
from dataclasses import dataclass

from .models.blueprint import PageSection
from .models.campaign import CampaignInput
from .models.feedback import Feedback

SECTION_ORDER: tuple[str, ...] = ("Hero", "SocialProof", "ValueProps", "Offer", "Guarantee", "Footer")
HEADLINE_WORD_LIMIT = 12
VISUAL_MODE = "Dark Mode, high contrast"


@dataclass(frozen=True)
class PromptPair:
    system_instruction: str
    user_prompt: str


def build_generation_prompts(campaign: CampaignInput) -> PromptPair:
    """Build the role and task instructions for a full blueprint."""
    order = " -> ".join(SECTION_ORDER)
    system_instruction = f"""ROLE: Senior CRO & Landing Page Architect.

OBJECTIVE:
Generate a high-converting landing page structure in strict JSON format.

RULES:
1. Output RAW JSON ONLY. No markdown blocks, no commentary.
2. Sections Order: {order}.
3. Copy: Persuasive, direct, and benefit-oriented.
4. Constraints:
   - Headlines: Concise (under {HEADLINE_WORD_LIMIT} words).
   - Descriptions: 1-2 sentences.
   - Ribbon: Short badge text only (e.g. "Best Seller"). DO NOT include validation text.
   - Images: Visual descriptions required for key sections.
5. Every section needs a stable "id" (e.g. "Hero", "SocialProof") that is unique on the page.

NEGATIVE CONSTRAINTS:
- Do NOT generate internal monologue or self-correction text.
- Do NOT repeat phrases.
- Do NOT make up fields that are not in the schema (e.g. "subheadline").
"""

    context_lines = [
        f"- Product: {campaign.product_details}",
        f"- Ad Copy: {campaign.ad_copy}",
        f"- Audience: {campaign.audience_attributes}",
        f"- Goal: {campaign.campaign_objective.value}",
    ]
    if campaign.ad_platform:
        context_lines.append(f"- Ad Platform: {campaign.ad_platform}")
    if campaign.keywords:
        context_lines.append(f"- Keywords: {campaign.keywords}")
    if campaign.brand_constraints:
        context_lines.append(f"- Brand Constraints: {campaign.brand_constraints}")
    context_lines.append(f"- Design: {VISUAL_MODE}")

    user_prompt = "Generate landing page blueprint.\nContext:\n" + "\n".join(context_lines) + "\n"
    return PromptPair(system_instruction=system_instruction, user_prompt=user_prompt)


def build_regeneration_prompts(
    section: PageSection,
    feedback: Feedback,
    context: CampaignInput | None = None,
) -> PromptPair:
    """Build the role and task instructions for rewriting one section."""
    system_instruction = """ROLE: Senior CRO Copywriter.

TASK: Rewrite the provided section based on feedback.

RULES:
- Return valid JSON matching the section schema.
- Rewrite ONLY this section. Keep its structure and existing fields (description, image, etc).
- Apply the feedback strictly.
- No conversational text.
"""
    if context is not None and context.brand_constraints:
        system_instruction += f"- Respect the brand constraints: {context.brand_constraints}\n"

    section_json = json.dumps(
        section.model_dump(by_alias=True, exclude_none=True),
        ensure_ascii=False,
        indent=2,
    )
    comment = (feedback.comment or "").strip() or "(no additional comment)"
    user_prompt = f"""SECTION TO EDIT:
{section_json}

FEEDBACK:
{comment}

OUTPUT:
Updated JSON object for this section.
"""
    return PromptPair(system_instruction=system_instruction, user_prompt=user_prompt)


__all__ = [
    "HEADLINE_WORD_LIMIT",
    "PromptPair",
    "SECTION_ORDER",
    "VISUAL_MODE",
    "build_generation_prompts",
    "build_regeneration_prompts",
]
