from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import MissingCredentialError

DEFAULT_GENERATION_MODEL = "gemini-3-pro-preview"
DEFAULT_REGENERATION_MODEL = "gemini-3-flash-preview"
DEFAULT_LOCATION = "us-central1"


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    project_id: str | None
    location: str = DEFAULT_LOCATION
    generation_model: str = DEFAULT_GENERATION_MODEL
    regeneration_model: str = DEFAULT_REGENERATION_MODEL
    environment: str = "dev"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Read settings from the environment.

        Either ``GEMINI_API_KEY`` or ``PROJECT_ID`` (Vertex AI) must be set.

        Raises:
            MissingCredentialError: Neither credential is present.
        """
        env = os.environ if environ is None else environ
        api_key = env.get("GEMINI_API_KEY") or None
        project_id = env.get("PROJECT_ID") or None
        if not api_key and not project_id:
            raise MissingCredentialError("Set GEMINI_API_KEY or PROJECT_ID before starting the service.")

        return cls(
            api_key=api_key,
            project_id=project_id,
            location=env.get("VERTEX_LOCATION", DEFAULT_LOCATION),
            generation_model=env.get("GENERATION_MODEL", DEFAULT_GENERATION_MODEL),
            regeneration_model=env.get("REGENERATION_MODEL", DEFAULT_REGENERATION_MODEL),
            environment=env.get("ENVIRONMENT", "dev"),
        )


__all__ = ["Settings", "DEFAULT_GENERATION_MODEL", "DEFAULT_REGENERATION_MODEL"]
