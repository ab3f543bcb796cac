from __future__ import annotations

import logging
import uuid

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .config import Settings
from .errors import GenerationFailure
from .gemini_adapter import GeminiAdapter
from .generator import BlueprintGenerator
from .logging_config import set_request_id
from .merge import apply_regenerated_section, set_section_lock
from .models.blueprint import LandingPageBlueprint
from .models.campaign import CampaignInput
from .models.feedback import Feedback

logger = logging.getLogger(__name__)

GENERIC_FAILURE_DETAIL = "Failed to generate blueprint. Please retry."


class _RequestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegenerateSectionRequest(_RequestModel):
    blueprint: LandingPageBlueprint
    feedback: Feedback
    context: CampaignInput


class LockSectionRequest(_RequestModel):
    blueprint: LandingPageBlueprint
    section_id: str
    locked: bool = True


def create_app(generator: BlueprintGenerator | None = None) -> FastAPI:
    """Build the HTTP app.

    Without an explicit ``generator`` one is built from the environment, so a
    missing model credential stops the process here.
    """
    if generator is None:
        settings = Settings.from_env()
        generator = BlueprintGenerator.from_settings(settings, GeminiAdapter.from_settings(settings))

    app = FastAPI(title="Landing Blueprint API", version="0.1.0")

    @app.middleware("http")
    async def bind_request_id(request: Request, call_next):
        set_request_id(request.headers.get("x-request-id") or uuid.uuid4().hex)
        try:
            return await call_next(request)
        finally:
            set_request_id(None)

    @app.post("/v1/blueprints:generate", response_model=LandingPageBlueprint)
    async def generate_blueprint(campaign: CampaignInput) -> LandingPageBlueprint:
        try:
            return await generator.generate_blueprint(campaign)
        except GenerationFailure as exc:
            logger.error("Blueprint generation failed", exc_info=True, extra={"error": str(exc)})
            raise HTTPException(status_code=502, detail=GENERIC_FAILURE_DETAIL) from exc

    @app.post("/v1/blueprints/sections:regenerate", response_model=LandingPageBlueprint)
    async def regenerate_section(request: RegenerateSectionRequest) -> LandingPageBlueprint:
        section = request.blueprint.get_section(request.feedback.section_id)
        if section is None:
            raise HTTPException(status_code=404, detail="Section not found")
        if section.is_locked:
            raise HTTPException(status_code=409, detail="Section is locked")

        try:
            updated = await generator.regenerate_section(section, request.feedback, request.context)
        except GenerationFailure as exc:
            logger.error(
                "Section regeneration failed",
                exc_info=True,
                extra={"section_id": section.id, "error": str(exc)},
            )
            raise HTTPException(status_code=502, detail=GENERIC_FAILURE_DETAIL) from exc

        return apply_regenerated_section(request.blueprint, updated)

    @app.post("/v1/blueprints/sections:lock", response_model=LandingPageBlueprint)
    async def lock_section(request: LockSectionRequest) -> LandingPageBlueprint:
        if request.blueprint.get_section(request.section_id) is None:
            raise HTTPException(status_code=404, detail="Section not found")
        return set_section_lock(request.blueprint, request.section_id, request.locked)

    @app.get("/health")
    async def healthcheck() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    return app


__all__ = ["create_app", "LockSectionRequest", "RegenerateSectionRequest"]
