"""Mutation resolvers for user profile domain.

- save: Create or update the profile form
"""

from typing import Optional

import strawberry

from mealmate.application.user_profile.commands.save_profile import (
    SaveUserProfileCommand,
    SaveUserProfileHandler,
)
from mealmate.domain.meal_planning.vocabulary import DietaryGoal, WorkoutTiming
from mealmate.domain.user_profile.core.value_objects.athlete_profile import (
    AthleteProfile,
)
from mealmate.graphql.resolvers.body_metrics.queries import map_anthropometrics_input
from mealmate.graphql.resolvers.user_profile.queries import (
    map_domain_profile_to_graphql,
)
from mealmate.graphql.types_user_profile import (
    AthleteInput,
    SaveUserProfileInput,
    SaveUserProfileResultType,
)


def map_athlete_input(input: Optional[AthleteInput]) -> Optional[AthleteProfile]:
    if input is None:
        return None
    return AthleteProfile(
        activity_type=input.activity_type,
        workout_timing=WorkoutTiming(input.workout_timing.value),
        athletic_goal=input.athletic_goal,
        training_phase=input.training_phase,
        training_phase_goal=input.training_phase_goal,
    )


@strawberry.type
class UserProfileMutations:
    """GraphQL mutations for user profile domain."""

    @strawberry.mutation
    async def save(
        self,
        info: strawberry.types.Info,
        input: SaveUserProfileInput,
    ) -> SaveUserProfileResultType:
        """Create or update a user profile.

        Existing feedback history and palate profile are kept unless
        ``resetFeedback`` is true.

        Example:
            mutation {
              userProfile {
                save(input: {
                  userId: "user123"
                  anthropometrics: {
                    gender: FEMALE, heightCm: 165, weightKg: 60, age: 28
                  }
                  dietaryGoal: MAINTENANCE
                }) {
                  created
                  profile { userId feedbackCount }
                }
              }
            }
        """
        context = info.context
        repository = context.get("user_profile_repository")
        event_bus = context.get("event_bus")

        if not repository:
            raise Exception("Missing user_profile_repository in GraphQL context")

        command = SaveUserProfileCommand(
            user_id=input.user_id,
            anthropometrics=map_anthropometrics_input(input.anthropometrics),
            dietary_goal=DietaryGoal(input.dietary_goal.value),
            illnesses=tuple(input.illnesses),
            other_illness_details=input.other_illness_details,
            current_mood=input.current_mood,
            current_craving=input.current_craving,
            athlete=map_athlete_input(input.athlete),
            reset_feedback=input.reset_feedback,
        )

        handler = SaveUserProfileHandler(repository=repository, event_bus=event_bus)
        result = await handler.handle(command)

        return SaveUserProfileResultType(
            profile=map_domain_profile_to_graphql(result.profile),
            created=result.created,
        )
