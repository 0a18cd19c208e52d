"""Notification payloads derived from match results."""

from __future__ import annotations

from collections.abc import Sequence

from skillswap.matching.config import MatchingConfig, get_matching_config
from skillswap.matching.models import (
    CompatibilityResult,
    MatchNotification,
    NotificationKind,
    NotificationPriority,
)


def format_score(score: float) -> str:
    """Render a score without a trailing '.0' for whole numbers."""
    return f"{score:g}"


def distinct_categories(results: Sequence[CompatibilityResult]) -> list[str]:
    """Return result categories in first-seen order, without repeats."""
    return list(dict.fromkeys(r.skill_category for r in results))


def generate_match_notifications(
    results: Sequence[CompatibilityResult],
    config: MatchingConfig | None = None,
) -> list[MatchNotification]:
    """Build notifications for a batch of results.

    Emits at most one high-match notification (for the first result above
    the high-match threshold) and at most one trending-skill notification.
    """
    config = config or get_matching_config()
    notifications: list[MatchNotification] = []

    high_matches = [r for r in results if r.score > config.high_match_threshold]
    if high_matches:
        top = high_matches[0]
        notifications.append(
            MatchNotification(
                kind=NotificationKind.HIGH_MATCH,
                title="Perfect Match Found!",
                message=(
                    f"{top.user_name} has a {top.skill_title} skill with "
                    f"{format_score(top.score)}% compatibility"
                ),
                priority=NotificationPriority.HIGH,
            )
        )

    trending = distinct_categories(results)[: config.trending_category_count]
    if trending:
        notifications.append(
            MatchNotification(
                kind=NotificationKind.TRENDING_SKILL,
                title="Trending Skills",
                message=f"Skills in {', '.join(trending)} are in high demand",
                priority=NotificationPriority.MEDIUM,
            )
        )

    return notifications
