"""SQLAlchemy models for every console resource."""

from __future__ import annotations

from feedback_console.models.feedback import UserFeedback
from feedback_console.models.recommender import Recommender
from feedback_console.models.validation_utility import ValidationUtility

__all__ = ["Recommender", "UserFeedback", "ValidationUtility"]
