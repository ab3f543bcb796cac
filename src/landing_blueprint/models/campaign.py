from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CampaignObjective(str, Enum):
    purchase = "purchase"
    lead = "lead"
    signup = "signup"
    other = "other"


class CampaignInput(BaseModel):
    ad_platform: str = Field(description="Where the ad runs, e.g. Google Ads")
    campaign_objective: CampaignObjective
    ad_copy: str
    keywords: str = ""
    audience_attributes: str
    product_details: str
    brand_constraints: str = ""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "adPlatform": "Google Ads",
                "campaignObjective": "purchase",
                "adCopy": "Stop overpaying for blades. Get a close shave for $5.",
                "keywords": "best razor for men, cheap razor blades, subscription shave",
                "audienceAttributes": "Men 25-45, value-conscious, currently using drugstore brands.",
                "productDetails": (
                    "The Executive Handle. Weighted zinc body, 5-blade german steel cartridges. "
                    "Starter set $5. 100% money back guarantee."
                ),
                "brandConstraints": "Direct, masculine but polite, minimalist design, no slang.",
            }
        },
    )


__all__ = ["CampaignInput", "CampaignObjective"]
