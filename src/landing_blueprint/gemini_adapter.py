from __future__ import annotations

import logging
import time

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from .config import Settings
from .errors import GenerationFailure
from .oracle import OracleRequest

logger = logging.getLogger(__name__)


class GeminiAdapter:
    """Adapter for Gemini models through the google-genai SDK."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        project_id: str | None = None,
        location: str = "us-central1",
        client: genai.Client | None = None,
    ) -> None:
        """Initialize the Gemini adapter.

        Args:
            api_key: Gemini API key. Takes precedence over ``project_id``.
            project_id: GCP project ID, selects the Vertex AI backend
            location: Vertex AI location
            client: Preconfigured client, mostly for tests
        """
        if client is not None:
            self.client = client
        elif api_key:
            self.client = genai.Client(api_key=api_key)
        else:
            self.client = genai.Client(vertexai=True, project=project_id, location=location)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiAdapter":
        return cls(
            api_key=settings.api_key,
            project_id=settings.project_id,
            location=settings.location,
        )

    async def generate(self, request: OracleRequest) -> str | None:
        """Send one request and return the raw response text.

        Args:
            request: Model, instructions and decoding settings

        Returns:
            Generated text, or None when the model returned no text

        Raises:
            GenerationFailure: The API call itself failed.
        """
        config = types.GenerateContentConfig(
            system_instruction=request.system_instruction,
            response_mime_type=request.config.response_mime_type,
            response_schema=dict(request.config.response_schema),
            temperature=request.config.temperature,
            top_p=request.config.top_p,
            max_output_tokens=request.config.max_output_tokens,
        )

        started = time.monotonic()
        try:
            response = await self.client.aio.models.generate_content(
                model=request.model,
                contents=request.prompt,
                config=config,
            )
        except genai_errors.APIError as exc:
            logger.error(
                "Gemini request failed",
                exc_info=True,
                extra={"model": request.model, "status_code": exc.code},
            )
            raise GenerationFailure(f"Model request failed: {exc}") from exc

        generated_text = response.text

        logger.info(
            "Generated content with Gemini",
            extra={
                "model": request.model,
                "temperature": request.config.temperature,
                "input_length": len(request.prompt),
                "output_length": len(generated_text or ""),
                "elapsed_ms": int((time.monotonic() - started) * 1000),
            },
        )

        return generated_text


__all__ = ["GeminiAdapter"]
