import pytest
from pydantic import ValidationError

from landing_blueprint.models.blueprint import LandingPageBlueprint, PageSection
from landing_blueprint.models.campaign import CampaignInput, CampaignObjective
from landing_blueprint.models.feedback import Feedback, FeedbackPriority, FeedbackType

from tests.support import blueprint_payload, section_payload


def test_blueprint_reads_camel_case(blueprint):
    assert blueprint.primary_intent == "Sell the $5 starter set"
    assert blueprint.design_hints.contrast_level == "high"
    assert blueprint.section_ids() == ["Hero", "SocialProof", "Offer"]
    assert all(section.is_locked is False for section in blueprint.sections)


def test_blueprint_dumps_camel_case(blueprint):
    dumped = blueprint.model_dump(by_alias=True)
    assert "primaryIntent" in dumped
    assert dumped["sections"][0]["isLocked"] is False


def test_duplicate_section_ids_are_rejected():
    payload = blueprint_payload()
    payload["sections"].append(section_payload("Hero", "Again"))
    with pytest.raises(ValidationError):
        LandingPageBlueprint.model_validate(payload)


@pytest.mark.parametrize("field", ["headline", "description"])
def test_section_requires_headline_and_description(field):
    payload = section_payload("Hero", "Shave Smarter")
    del payload["content"][field]
    with pytest.raises(ValidationError):
        PageSection.model_validate(payload)


def test_blank_headline_is_rejected():
    payload = section_payload("Hero", "   ")
    with pytest.raises(ValidationError):
        PageSection.model_validate(payload)


def test_layout_is_restricted():
    with pytest.raises(ValidationError):
        PageSection.model_validate(section_payload("Hero", "Hi", layout="masonry"))


def test_models_are_frozen(blueprint):
    with pytest.raises(ValidationError):
        blueprint.primary_intent = "changed"


def test_campaign_accepts_both_spellings():
    by_alias = CampaignInput.model_validate(
        {
            "adPlatform": "Meta",
            "campaignObjective": "lead",
            "adCopy": "Get the guide",
            "audienceAttributes": "Founders",
            "productDetails": "Free guide",
        }
    )
    by_name = CampaignInput(
        ad_platform="Meta",
        campaign_objective="lead",
        ad_copy="Get the guide",
        audience_attributes="Founders",
        product_details="Free guide",
    )
    assert by_alias == by_name
    assert by_alias.campaign_objective is CampaignObjective.lead


def test_campaign_objective_is_an_enumeration():
    with pytest.raises(ValidationError):
        CampaignInput(
            ad_platform="Meta",
            campaign_objective="awareness",
            ad_copy="x",
            audience_attributes="y",
            product_details="z",
        )


def test_feedback_defaults():
    feedback = Feedback.model_validate({"sectionId": "Hero", "feedbackType": "copy_edit"})
    assert feedback.feedback_type is FeedbackType.copy_edit
    assert feedback.priority is FeedbackPriority.medium
    assert feedback.comment is None
