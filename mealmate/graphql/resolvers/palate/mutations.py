"""Mutation resolvers for palate domain.

- submitFeedback: Fold feedback on a meal into the user's palate profile
"""

import strawberry

from mealmate.application.palate.commands.submit_feedback import (
    SubmitMealFeedbackCommand,
    SubmitMealFeedbackHandler,
)
from mealmate.domain.palate.core.value_objects.meal_feedback import MealFeedback
from mealmate.graphql.resolvers.palate.queries import map_palate_state_to_graphql
from mealmate.graphql.types_palate import PalateStateType, SubmitFeedbackInput


@strawberry.type
class PalateMutations:
    """GraphQL mutations for palate domain."""

    @strawberry.mutation
    async def submit_feedback(
        self,
        info: strawberry.types.Info,
        input: SubmitFeedbackInput,
    ) -> PalateStateType:
        """Submit feedback on the last meal suggestion.

        Liked aspects move to the preferred list, improvement aspects to
        the disliked list; only the last 5 submissions are kept.

        Example:
            mutation {
              palate {
                submitFeedback(input: {
                  userId: "user123"
                  rating: 4
                  likedAspects: ["طعم تند"]
                  improvementAspects: ["بافت ترد"]
                }) {
                  palateProfile { preferredAspects dislikedAspects }
                }
              }
            }

        Raises:
            EmptyFeedbackError: If the submission carries nothing
            InvalidFeedbackError: If rating is outside 1-5
            UserProfileNotFoundError: If the user has no profile
        """
        context = info.context
        repository = context.get("user_profile_repository")
        event_bus = context.get("event_bus")

        if not repository:
            raise Exception("Missing user_profile_repository in GraphQL context")

        command = SubmitMealFeedbackCommand(
            user_id=input.user_id,
            feedback=MealFeedback(
                rating=input.rating,
                liked_aspects=tuple(input.liked_aspects),
                improvement_aspects=tuple(input.improvement_aspects),
                other_comments=input.other_comments,
            ),
        )

        handler = SubmitMealFeedbackHandler(repository=repository, event_bus=event_bus)
        result = await handler.handle(command)

        return map_palate_state_to_graphql(
            result.user_id, result.update.profile, result.update.history
        )
