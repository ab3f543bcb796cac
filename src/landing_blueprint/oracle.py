from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol

GENERATION_MAX_OUTPUT_TOKENS = 4096
REGENERATION_MAX_OUTPUT_TOKENS = 2048


@dataclass(frozen=True)
class OracleConfig:
    response_schema: Mapping[str, Any]
    max_output_tokens: int
    temperature: float = 0.0
    top_p: float = 0.7
    response_mime_type: str = "application/json"


@dataclass(frozen=True)
class OracleRequest:
    model: str
    system_instruction: str
    prompt: str
    config: OracleConfig


class Oracle(Protocol):
    async def generate(self, request: OracleRequest) -> str | None:
        ...


__all__ = [
    "GENERATION_MAX_OUTPUT_TOKENS",
    "Oracle",
    "OracleConfig",
    "OracleRequest",
    "REGENERATION_MAX_OUTPUT_TOKENS",
]
