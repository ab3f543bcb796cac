from __future__ import annotations

import asyncio


class FakeOracle:
    """Replays canned responses in call order and records every request."""

    def __init__(self, *responses, delays=None) -> None:
        self.responses = list(responses)
        self.delays = list(delays or [])
        self.requests = []

    async def generate(self, request):
        self.requests.append(request)
        response = self.responses.pop(0)
        delay = self.delays.pop(0) if self.delays else 0
        if delay:
            await asyncio.sleep(delay)
        if isinstance(response, Exception):
            raise response
        return response


def section_payload(section_id: str, headline: str, **overrides) -> dict:
    payload = {
        "id": section_id,
        "type": section_id,
        "layout": "centered",
        "content": {
            "headline": headline,
            "description": f"{headline} description.",
        },
    }
    payload.update(overrides)
    return payload


def blueprint_payload() -> dict:
    return {
        "primaryIntent": "Sell the $5 starter set",
        "designHints": {
            "visualStyle": "Dark minimalist",
            "contrastLevel": "high",
            "spacing": "generous",
            "trustEmphasis": "high",
        },
        "sections": [
            section_payload("Hero", "Shave Smarter", layout="centered"),
            section_payload("SocialProof", "Trusted by 10,000 Men", layout="grid"),
            section_payload("Offer", "Starter Set for $5", layout="two-column"),
        ],
    }
