"""Query resolvers for user profile domain."""

from typing import Optional

import strawberry

from mealmate.application.user_profile.queries.get_profile import (
    GetUserProfileQuery,
    GetUserProfileQueryHandler,
)
from mealmate.domain.user_profile.core.entities.user_profile import UserProfile
from mealmate.graphql.resolvers.palate.queries import map_palate_profile_to_graphql
from mealmate.graphql.types_body_metrics import GenderEnum
from mealmate.graphql.types_user_profile import (
    AthleteType,
    DietaryGoalEnum,
    UserProfileType,
    WorkoutTimingEnum,
)


def map_domain_profile_to_graphql(profile: UserProfile) -> UserProfileType:
    """Map domain UserProfile to GraphQL UserProfileType."""
    body = profile.anthropometrics
    athlete = profile.athlete
    return UserProfileType(
        user_id=profile.user_id,
        gender=GenderEnum(body.gender.value),
        height_cm=body.height_cm,
        weight_kg=body.weight_kg,
        age=body.age,
        dietary_goal=DietaryGoalEnum(profile.dietary_goal.value),
        illnesses=list(profile.illnesses),
        other_illness_details=profile.other_illness_details,
        current_mood=profile.current_mood,
        current_craving=profile.current_craving,
        athlete=(
            AthleteType(
                activity_type=athlete.activity_type,
                workout_timing=WorkoutTimingEnum(athlete.workout_timing.value),
                athletic_goal=athlete.athletic_goal,
                training_phase=athlete.training_phase,
                training_phase_goal=athlete.training_phase_goal,
            )
            if athlete is not None
            else None
        ),
        palate_profile=map_palate_profile_to_graphql(profile.palate_profile),
        feedback_count=len(profile.feedback_history),
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


@strawberry.type
class UserProfileQueries:
    """GraphQL queries for user profile domain."""

    @strawberry.field
    async def by_user_id(
        self,
        info: strawberry.types.Info,
        user_id: str,
    ) -> Optional[UserProfileType]:
        """Get a stored profile, None if not found.

        Example:
            query {
              userProfile {
                byUserId(userId: "user123") { dietaryGoal feedbackCount }
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
        return map_domain_profile_to_graphql(profile)
