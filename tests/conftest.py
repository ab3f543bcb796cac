from __future__ import annotations

import json

import pytest

from landing_blueprint.models.blueprint import LandingPageBlueprint
from landing_blueprint.models.campaign import CampaignInput, CampaignObjective

from tests.support import blueprint_payload


@pytest.fixture
def campaign() -> CampaignInput:
    return CampaignInput(
        ad_platform="Google Ads",
        campaign_objective=CampaignObjective.purchase,
        ad_copy="Stop overpaying for blades. Get a close shave for $5.",
        keywords="best razor for men, cheap razor blades",
        audience_attributes="Men 25-45, value-conscious",
        product_details="The Executive Handle. Starter set $5. 100% money back guarantee.",
        brand_constraints="Direct, minimalist, no slang.",
    )


@pytest.fixture
def blueprint() -> LandingPageBlueprint:
    return LandingPageBlueprint.model_validate(blueprint_payload())


@pytest.fixture
def blueprint_json() -> str:
    return json.dumps(blueprint_payload())
