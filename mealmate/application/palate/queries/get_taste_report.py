"""GetTasteReportQuery - summarize a user's liked aspects."""

from dataclasses import dataclass

from mealmate.domain.palate.core.value_objects.taste_report import TasteReport
from mealmate.domain.palate.services.taste_report import build_taste_report
from mealmate.domain.user_profile.core.exceptions.domain_errors import (
    UserProfileNotFoundError,
)
from mealmate.domain.user_profile.core.ports.repository import (
    IUserProfileRepository,
)


@dataclass(frozen=True)
class GetTasteReportQuery:
    """Query for the taste report of a user.

    Attributes:
        user_id: User identifier
    """

    user_id: str


class GetTasteReportQueryHandler:
    """Builds the taste report from the stored feedback history."""

    def __init__(self, repository: IUserProfileRepository):
        self._repository = repository

    async def handle(self, query: GetTasteReportQuery) -> TasteReport:
        """
        Raises:
            UserProfileNotFoundError: If the user has no profile
        """
        profile = await self._repository.find_by_user_id(query.user_id)
        if profile is None:
            raise UserProfileNotFoundError(query.user_id)
        return build_taste_report(profile.feedback_history)
