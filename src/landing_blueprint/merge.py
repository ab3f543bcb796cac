from __future__ import annotations

import logging

from .models.blueprint import LandingPageBlueprint, PageSection

logger = logging.getLogger(__name__)


def apply_regenerated_section(blueprint: LandingPageBlueprint, updated: PageSection) -> LandingPageBlueprint:
    """Return a copy of ``blueprint`` with the section sharing ``updated.id`` replaced.

    Section order, the other sections, ``primary_intent`` and ``design_hints``
    are carried over untouched. An unknown id or a locked target leaves the
    blueprint as it is.
    """
    current = blueprint.get_section(updated.id)
    if current is None:
        logger.warning("Merge target not found", extra={"section_id": updated.id})
        return blueprint
    if current.is_locked:
        logger.warning("Refusing to overwrite a locked section", extra={"section_id": updated.id})
        return blueprint

    sections = tuple(updated if section.id == updated.id else section for section in blueprint.sections)
    return blueprint.model_copy(update={"sections": sections})


def set_section_lock(blueprint: LandingPageBlueprint, section_id: str, locked: bool) -> LandingPageBlueprint:
    """Return a copy of ``blueprint`` with the lock flag of one section set."""
    current = blueprint.get_section(section_id)
    if current is None or current.is_locked == locked:
        return blueprint

    replacement = current.model_copy(update={"is_locked": locked})
    sections = tuple(replacement if section.id == section_id else section for section in blueprint.sections)
    return blueprint.model_copy(update={"sections": sections})


__all__ = ["apply_regenerated_section", "set_section_lock"]
