from __future__ import annotations

import asyncio
import logging

from .errors import BlueprintError, SectionLockedError, SectionNotFoundError
from .generator import BlueprintGenerator
from .merge import apply_regenerated_section, set_section_lock
from .models.blueprint import LandingPageBlueprint
from .models.campaign import CampaignInput
from .models.feedback import Feedback, FeedbackType

logger = logging.getLogger(__name__)


class BlueprintSession:
    """Holds the current blueprint for one editing session.

    Regenerations for different sections may run concurrently. Each result is
    merged into the latest blueprint under a lock, never into the snapshot the
    request started from.
    """

    def __init__(self, generator: BlueprintGenerator, campaign: CampaignInput) -> None:
        self._generator = generator
        self._campaign = campaign
        self._blueprint: LandingPageBlueprint | None = None
        self._lock = asyncio.Lock()

    @property
    def blueprint(self) -> LandingPageBlueprint | None:
        return self._blueprint

    @property
    def campaign(self) -> CampaignInput:
        return self._campaign

    async def generate(self) -> LandingPageBlueprint:
        blueprint = await self._generator.generate_blueprint(self._campaign)
        async with self._lock:
            self._blueprint = blueprint
        return blueprint

    async def apply_feedback(self, feedback: Feedback) -> LandingPageBlueprint:
        """Apply one piece of feedback and return the updated blueprint.

        ``lock`` feedback locks the section without calling the model. Any
        other type regenerates the section and merges the result.

        Raises:
            SectionNotFoundError: No section has ``feedback.section_id``.
            SectionLockedError: The section is locked.
            GenerationFailure: The model returned nothing usable.
        """
        current = self._require_blueprint()
        section = current.get_section(feedback.section_id)
        if section is None:
            raise SectionNotFoundError(feedback.section_id)

        if feedback.feedback_type is FeedbackType.lock:
            async with self._lock:
                self._blueprint = set_section_lock(self._require_blueprint(), section.id, True)
                return self._blueprint

        if section.is_locked:
            raise SectionLockedError(section.id)

        updated = await self._generator.regenerate_section(section, feedback, self._campaign)

        async with self._lock:
            latest = self._require_blueprint()
            latest_section = latest.get_section(section.id)
            if latest_section is not None and latest_section.is_locked:
                # Locked while the request was in flight; drop the result.
                logger.info("Discarding regeneration for a section locked meanwhile", extra={"section_id": section.id})
                return latest
            self._blueprint = apply_regenerated_section(latest, updated)
            return self._blueprint

    async def toggle_lock(self, section_id: str) -> LandingPageBlueprint:
        async with self._lock:
            current = self._require_blueprint()
            section = current.get_section(section_id)
            if section is None:
                raise SectionNotFoundError(section_id)
            self._blueprint = set_section_lock(current, section_id, not section.is_locked)
            return self._blueprint

    def _require_blueprint(self) -> LandingPageBlueprint:
        if self._blueprint is None:
            raise BlueprintError("No blueprint has been generated yet")
        return self._blueprint


__all__ = ["BlueprintSession"]
