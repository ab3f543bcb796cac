import asyncio
import json

import pytest

from landing_blueprint.errors import BlueprintError, SectionLockedError, SectionNotFoundError
from landing_blueprint.generator import BlueprintGenerator
from landing_blueprint.models.feedback import Feedback, FeedbackType
from landing_blueprint.session import BlueprintSession

from tests.support import FakeOracle, section_payload


def _feedback(section_id: str, feedback_type: FeedbackType = FeedbackType.copy_edit) -> Feedback:
    return Feedback(section_id=section_id, feedback_type=feedback_type, comment="Tighten the copy")


def test_apply_feedback_regenerates_and_merges(campaign, blueprint_json):
    oracle = FakeOracle(blueprint_json, json.dumps(section_payload("Offer", "Only $5 Today")))
    session = BlueprintSession(BlueprintGenerator(oracle), campaign)

    async def run():
        await session.generate()
        return await session.apply_feedback(_feedback("Offer"))

    result = asyncio.run(run())

    assert result is session.blueprint
    assert result.section_ids() == ["Hero", "SocialProof", "Offer"]
    assert result.get_section("Offer").content.headline == "Only $5 Today"
    assert result.get_section("Hero").content.headline == "Shave Smarter"


def test_lock_feedback_does_not_call_the_model(campaign, blueprint_json):
    oracle = FakeOracle(blueprint_json)
    session = BlueprintSession(BlueprintGenerator(oracle), campaign)

    async def run():
        await session.generate()
        await session.apply_feedback(_feedback("Hero", FeedbackType.lock))
        return await session.apply_feedback(_feedback("Hero"))

    with pytest.raises(SectionLockedError):
        asyncio.run(run())

    assert len(oracle.requests) == 1
    assert session.blueprint.get_section("Hero").is_locked is True


def test_unknown_section_is_reported(campaign, blueprint_json):
    session = BlueprintSession(BlueprintGenerator(FakeOracle(blueprint_json)), campaign)

    async def run():
        await session.generate()
        await session.apply_feedback(_feedback("Pricing"))

    with pytest.raises(SectionNotFoundError):
        asyncio.run(run())


def test_feedback_before_generation_fails(campaign):
    session = BlueprintSession(BlueprintGenerator(FakeOracle()), campaign)

    with pytest.raises(BlueprintError):
        asyncio.run(session.apply_feedback(_feedback("Hero")))


def test_concurrent_regenerations_keep_both_edits(campaign, blueprint_json):
    oracle = FakeOracle(
        blueprint_json,
        json.dumps(section_payload("Hero", "Slow Hero")),
        json.dumps(section_payload("Offer", "Fast Offer")),
        delays=[0, 0.05, 0],
    )
    session = BlueprintSession(BlueprintGenerator(oracle), campaign)

    async def run():
        await session.generate()
        await asyncio.gather(
            session.apply_feedback(_feedback("Hero")),
            session.apply_feedback(_feedback("Offer")),
        )

    asyncio.run(run())

    assert session.blueprint.section_ids() == ["Hero", "SocialProof", "Offer"]
    assert session.blueprint.get_section("Hero").content.headline == "Slow Hero"
    assert session.blueprint.get_section("Offer").content.headline == "Fast Offer"


def test_result_is_dropped_when_section_locked_in_flight(campaign, blueprint_json):
    oracle = FakeOracle(
        blueprint_json,
        json.dumps(section_payload("Hero", "Too Late")),
        delays=[0, 0.05],
    )
    session = BlueprintSession(BlueprintGenerator(oracle), campaign)

    async def run():
        await session.generate()
        regeneration = asyncio.create_task(session.apply_feedback(_feedback("Hero")))
        await asyncio.sleep(0)
        await session.toggle_lock("Hero")
        await regeneration

    asyncio.run(run())

    hero = session.blueprint.get_section("Hero")
    assert hero.is_locked is True
    assert hero.content.headline == "Shave Smarter"


def test_toggle_lock(campaign, blueprint_json):
    session = BlueprintSession(BlueprintGenerator(FakeOracle(blueprint_json)), campaign)

    async def run():
        await session.generate()
        first = await session.toggle_lock("SocialProof")
        second = await session.toggle_lock("SocialProof")
        return first, second

    first, second = asyncio.run(run())

    assert first.get_section("SocialProof").is_locked is True
    assert second.get_section("SocialProof").is_locked is False
