"""Taste report - most liked aspects across the feedback history."""

from collections import Counter
from typing import Iterable

from ..core.value_objects.meal_feedback import MealFeedback
from ..core.value_objects.taste_report import (
    AspectCount,
    TasteReport,
    TasteReportStatus,
)

TOP_ASPECTS_LIMIT = 3

NO_FEEDBACK_MESSAGE = "هنوز بازخورد کافی برای تهیه گزارش ذائقه ثبت نشده است."
NO_LIKED_ASPECTS_MESSAGE = (
    "در بازخوردهای اخیر، جنبه‌های دوست‌داشتنی خاصی انتخاب نشده است."
)
REPORT_TEMPLATE = (
    "گزارش ذائقه شما: به نظر می‌رسد به طعم‌ها و بافت‌های زیر علاقه بیشتری "
    "نشان داده‌اید: {aspects}. عالیه! به ارائه بازخورد ادامه دهید تا "
    "پیشنهادات هوشمندتری دریافت کنید."
)


def build_taste_report(history: Iterable[MealFeedback]) -> TasteReport:
    """Summarize which aspects the user liked most often.

    Counts liked aspects over every feedback in the history and keeps
    the three most frequent. Equal counts keep first-seen order.

    Args:
        history: Feedback events, oldest first

    Returns:
        TasteReport: Status, top aspects and a user-facing message
    """
    feedbacks = list(history)
    if not feedbacks:
        return TasteReport(
            status=TasteReportStatus.NO_FEEDBACK,
            top_aspects=(),
            message=NO_FEEDBACK_MESSAGE,
        )

    counts: Counter[str] = Counter()
    for feedback in feedbacks:
        counts.update(feedback.liked_aspects)

    if not counts:
        return TasteReport(
            status=TasteReportStatus.NO_LIKED_ASPECTS,
            top_aspects=(),
            message=NO_LIKED_ASPECTS_MESSAGE,
        )

    # sorted() is stable, ties stay in first-seen order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    top = tuple(
        AspectCount(aspect=aspect, count=count)
        for aspect, count in ranked[:TOP_ASPECTS_LIMIT]
    )
    aspects_text = "، ".join(f"{a.aspect} ({a.count} بار تکرار)" for a in top)

    return TasteReport(
        status=TasteReportStatus.OK,
        top_aspects=top,
        message=REPORT_TEMPLATE.format(aspects=aspects_text),
    )
