"""Query resolvers for palate domain.

- profile: Palate profile and recent feedback of a user
- tasteReport: Most liked aspects across recent feedback
- currentMealTime: Meal for the current local hour
"""

from typing import Optional

import strawberry

from mealmate.application.palate.queries.get_taste_report import (
    GetTasteReportQuery,
    GetTasteReportQueryHandler,
)
from mealmate.application.user_profile.queries.get_profile import (
    GetUserProfileQuery,
    GetUserProfileQueryHandler,
)
from mealmate.domain.meal_planning.meal_time import current_meal_time
from mealmate.domain.palate.core.value_objects.feedback_history import (
    FeedbackHistory,
)
from mealmate.domain.palate.core.value_objects.meal_feedback import MealFeedback
from mealmate.domain.palate.core.value_objects.palate_profile import PalateProfile
from mealmate.domain.palate.core.value_objects.taste_report import TasteReport
from mealmate.domain.user_profile.core.exceptions.domain_errors import (
    UserProfileNotFoundError,
)
from mealmate.graphql.types_palate import (
    AspectCountType,
    MealFeedbackType,
    MealTimeType,
    PalateProfileType,
    PalateStateType,
    TasteReportStatusEnum,
    TasteReportType,
)

# ============================================
# HELPER FUNCTIONS
# ============================================


def map_palate_profile_to_graphql(profile: PalateProfile) -> PalateProfileType:
    return PalateProfileType(
        preferred_aspects=list(profile.preferred_aspects),
        disliked_aspects=list(profile.disliked_aspects),
    )


def map_feedback_to_graphql(feedback: MealFeedback) -> MealFeedbackType:
    return MealFeedbackType(
        rating=feedback.rating,
        liked_aspects=list(feedback.liked_aspects),
        improvement_aspects=list(feedback.improvement_aspects),
        other_comments=feedback.other_comments,
    )


def map_palate_state_to_graphql(
    user_id: str, profile: PalateProfile, history: FeedbackHistory
) -> PalateStateType:
    """Map palate profile and feedback history to GraphQL PalateStateType."""
    return PalateStateType(
        user_id=user_id,
        palate_profile=map_palate_profile_to_graphql(profile),
        feedback_history=[map_feedback_to_graphql(feedback) for feedback in history],
    )


def map_taste_report_to_graphql(report: TasteReport) -> TasteReportType:
    return TasteReportType(
        status=TasteReportStatusEnum(report.status.value),
        top_aspects=[
            AspectCountType(aspect=item.aspect, count=item.count)
            for item in report.top_aspects
        ],
        message=report.message,
    )


# ============================================
# QUERY RESOLVERS
# ============================================


@strawberry.type
class PalateQueries:
    """GraphQL queries for palate domain."""

    @strawberry.field
    async def profile(
        self,
        info: strawberry.types.Info,
        user_id: str,
    ) -> Optional[PalateStateType]:
        """Get the learned palate profile with the feedback behind it.

        Example:
            query {
              palate {
                profile(userId: "user123") {
                  palateProfile { preferredAspects dislikedAspects }
                  feedbackHistory { rating likedAspects }
                }
              }
            }
        """
        repository = info.context.get("user_profile_repository")
        if not repository:
            raise Exception("Missing user_profile_repository in GraphQL context")

        handler = GetUserProfileQueryHandler(repository=repository)
        profile = await handler.handle(GetUserProfileQuery(user_id=user_id))
        if profile is None:
            return None
        return map_palate_state_to_graphql(
            profile.user_id, profile.palate_profile, profile.feedback_history
        )

    @strawberry.field
    async def taste_report(
        self,
        info: strawberry.types.Info,
        user_id: str,
    ) -> Optional[TasteReportType]:
        """Top liked aspects of a user, None if the user has no profile."""
        repository = info.context.get("user_profile_repository")
        if not repository:
            raise Exception("Missing user_profile_repository in GraphQL context")

        handler = GetTasteReportQueryHandler(repository=repository)
        try:
            report = await handler.handle(GetTasteReportQuery(user_id=user_id))
        except UserProfileNotFoundError:
            return None
        return map_taste_report_to_graphql(report)

    @strawberry.field
    def current_meal_time(self) -> MealTimeType:
        """Meal matching the server's local hour."""
        meal_time = current_meal_time()
        return MealTimeType(code=meal_time.name.lower(), name=meal_time.value)
