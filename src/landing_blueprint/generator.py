from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from .config import DEFAULT_GENERATION_MODEL, DEFAULT_REGENERATION_MODEL, Settings
from .errors import InvalidResponseError
from .json_repair import clean_and_parse_json
from .models.blueprint import LandingPageBlueprint, PageSection
from .models.campaign import CampaignInput
from .models.feedback import Feedback
from .oracle import (
    GENERATION_MAX_OUTPUT_TOKENS,
    REGENERATION_MAX_OUTPUT_TOKENS,
    Oracle,
    OracleConfig,
    OracleRequest,
)
from .prompts import PromptPair, build_generation_prompts, build_regeneration_prompts
from .schema import BLUEPRINT_RESPONSE_SCHEMA, SECTION_RESPONSE_SCHEMA

logger = logging.getLogger(__name__)


class BlueprintGenerator:
    """Generates blueprints and rewrites single sections through an oracle.

    Every call issues exactly one request. Nothing is retried and no state is
    kept between calls.
    """

    def __init__(
        self,
        oracle: Oracle,
        *,
        generation_model: str = DEFAULT_GENERATION_MODEL,
        regeneration_model: str = DEFAULT_REGENERATION_MODEL,
    ) -> None:
        self._oracle = oracle
        self._generation_model = generation_model
        self._regeneration_model = regeneration_model

    @classmethod
    def from_settings(cls, settings: Settings, oracle: Oracle) -> "BlueprintGenerator":
        return cls(
            oracle,
            generation_model=settings.generation_model,
            regeneration_model=settings.regeneration_model,
        )

    async def generate_blueprint(self, campaign: CampaignInput) -> LandingPageBlueprint:
        """Generate a full landing page blueprint for ``campaign``.

        Raises:
            GenerationFailure: The model returned nothing usable.
        """
        prompts = build_generation_prompts(campaign)
        payload = await self._request(
            prompts,
            model=self._generation_model,
            config=OracleConfig(
                response_schema=BLUEPRINT_RESPONSE_SCHEMA,
                max_output_tokens=GENERATION_MAX_OUTPUT_TOKENS,
            ),
        )

        try:
            blueprint = LandingPageBlueprint.model_validate(_without_lock_flags(payload))
        except ValidationError as exc:
            raise InvalidResponseError(_summarize(exc), payload=payload) from exc

        logger.info(
            "Generated landing page blueprint",
            extra={
                "objective": campaign.campaign_objective.value,
                "sections": blueprint.section_ids(),
            },
        )
        return blueprint

    async def regenerate_section(
        self,
        section: PageSection,
        feedback: Feedback,
        context: CampaignInput,
    ) -> PageSection:
        """Rewrite ``section`` according to ``feedback``.

        The returned section always carries ``section.id`` and is unlocked,
        whatever the model echoed back.

        Raises:
            GenerationFailure: The model returned nothing usable.
        """
        if section.is_locked:
            logger.warning("Regenerating a locked section", extra={"section_id": section.id})

        prompts = build_regeneration_prompts(section, feedback, context)
        payload = await self._request(
            prompts,
            model=self._regeneration_model,
            config=OracleConfig(
                response_schema=SECTION_RESPONSE_SCHEMA,
                max_output_tokens=REGENERATION_MAX_OUTPUT_TOKENS,
            ),
        )
        if not isinstance(payload, dict):
            raise InvalidResponseError("expected a JSON object for the section", payload=payload)

        # Identity and lock state belong to the caller, never to the model.
        forced = {key: value for key, value in payload.items() if key not in ("id", "isLocked", "is_locked")}
        forced["id"] = section.id
        forced["isLocked"] = False

        try:
            updated = PageSection.model_validate(forced)
        except ValidationError as exc:
            raise InvalidResponseError(_summarize(exc), payload=payload) from exc

        logger.info(
            "Regenerated section",
            extra={
                "section_id": section.id,
                "feedback_type": feedback.feedback_type.value,
                "priority": feedback.priority.value,
            },
        )
        return updated

    async def _request(self, prompts: PromptPair, *, model: str, config: OracleConfig) -> Any:
        request = OracleRequest(
            model=model,
            system_instruction=prompts.system_instruction,
            prompt=prompts.user_prompt,
            config=config,
        )
        raw_text = await self._oracle.generate(request)
        return clean_and_parse_json(raw_text)


def _without_lock_flags(payload: Any) -> Any:
    """Drop lock flags the model put on generated sections; locking is the caller's call."""
    if not isinstance(payload, dict) or not isinstance(payload.get("sections"), list):
        return payload
    sections = [
        {key: value for key, value in section.items() if key not in ("isLocked", "is_locked")}
        if isinstance(section, dict)
        else section
        for section in payload["sections"]
    ]
    return {**payload, "sections": sections}


def _summarize(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


__all__ = ["BlueprintGenerator"]
