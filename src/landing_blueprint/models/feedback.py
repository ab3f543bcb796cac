from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FeedbackType(str, Enum):
    copy_edit = "copy_edit"
    ux_issue = "ux_issue"
    clarity = "clarity"
    variant_request = "variant_request"
    lock = "lock"


class FeedbackPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"


class Feedback(BaseModel):
    section_id: str
    feedback_type: FeedbackType
    comment: str | None = None
    priority: FeedbackPriority = FeedbackPriority.medium

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


__all__ = ["Feedback", "FeedbackPriority", "FeedbackType"]
