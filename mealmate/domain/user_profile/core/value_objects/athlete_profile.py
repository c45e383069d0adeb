"""AthleteProfile value object - sport-nutrition context."""

from dataclasses import dataclass
from typing import Optional

from mealmate.domain.meal_planning.vocabulary import WorkoutTiming


@dataclass(frozen=True)
class AthleteProfile:
    """Training context of a user who asked for sport nutrition.

    Attributes:
        activity_type: strength, endurance, mixed, flexibility, other
        workout_timing: Meal timing relative to training
        athletic_goal: e.g. performance_enhancement, faster_recovery
        training_phase: e.g. bulking, cutting, competition_prep
        training_phase_goal: Free-text goal for the current phase
    """

    activity_type: Optional[str] = None
    workout_timing: WorkoutTiming = WorkoutTiming.GENERAL
    athletic_goal: Optional[str] = None
    training_phase: Optional[str] = None
    training_phase_goal: Optional[str] = None

    def has_training_phase(self) -> bool:
        return bool(self.training_phase)
