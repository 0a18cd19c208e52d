"""Match service: builds per-user match reports over a skill directory."""

from __future__ import annotations

from datetime import UTC, datetime

from skillswap.matching.analysis import analyze_match_patterns
from skillswap.matching.config import MatchingConfig, get_matching_config
from skillswap.matching.directory import SkillDirectory
from skillswap.matching.models import (
    MatchPreferences,
    MatchReport,
    PartnerMatch,
    Skill,
    SkillType,
    UserStats,
)
from skillswap.matching.notifications import format_score, generate_match_notifications
from skillswap.matching.scorer import find_matches
from skillswap.utils.logging import get_logger

logger = get_logger(__name__)

# Points per category that lines up between two users' offers and wants.
PARTNER_POINTS_PER_OVERLAP = 30


class MatchingService:
    """Service for computing match reports and partner suggestions."""

    def __init__(self, config: MatchingConfig | None = None) -> None:
        self.config = config or get_matching_config()

    def build_preferences(
        self, *, category: str | None = None, level: str | None = None
    ) -> MatchPreferences:
        """Turn single category/level filters into scoring preferences."""
        return MatchPreferences(
            preferred_categories=[category] if category else None,
            preferred_levels=[level] if level else None,
        )

    def build_match_report(
        self,
        user_id: str,
        directory: SkillDirectory,
        *,
        category: str | None = None,
        level: str | None = None,
        min_score: float | None = None,
        now: datetime | None = None,
    ) -> MatchReport:
        """Find, filter, analyze and summarize a user's matches.

        Args:
            user_id: The requesting user.
            directory: Source of the user's skills and the candidate pool.
            category: Optional preferred category.
            level: Optional preferred level.
            min_score: Extra cutoff applied after the fixed match threshold.
            now: Evaluation time for the recency term.

        Raises:
            UserNotFoundError: If the user is not in the directory.
        """
        directory.get_user(user_id)
        now = now or datetime.now(UTC)

        user_skills = directory.skills_for(user_id)
        candidates = directory.candidates_for(user_id)
        preferences = self.build_preferences(category=category, level=level)

        logger.info(
            f"Matching {len(user_skills)} skill(s) for user {user_id} "
            f"against {len(candidates)} candidate skill(s)"
        )

        matches = find_matches(
            user_id,
            user_skills,
            candidates,
            preferences,
            now=now,
            config=self.config,
        )

        cutoff = self.config.match_threshold if min_score is None else min_score
        matches = [m for m in matches if m.score >= cutoff]

        analysis = analyze_match_patterns(matches, config=self.config)
        notifications = generate_match_notifications(matches, config=self.config)

        logger.info(
            f"Found {len(matches)} match(es) for user {user_id} "
            f"(average {format_score(round(analysis.average_compatibility, 1))})"
        )

        return MatchReport(
            user_id=user_id,
            matches=matches,
            analysis=analysis,
            notifications=notifications,
            trending_skills=directory.category_counts(self.config.top_category_count),
            user_stats=UserStats(
                total_skills=len(user_skills),
                total_matches=len(matches),
                average_compatibility=analysis.average_compatibility,
            ),
            generated_at=now,
        )

    def find_partner_matches(
        self, user_id: str, directory: SkillDirectory, *, limit: int = 10
    ) -> list[PartnerMatch]:
        """Rank other users by how well their offers and wants fit the user's.

        Each of the user's wanted skills whose category another user offers,
        and each of that user's wanted skills whose category the user offers,
        is worth a fixed number of points.

        Raises:
            UserNotFoundError: If the user is not in the directory.
        """
        directory.get_user(user_id)
        my_offered, my_wanted = _split_by_type(directory.skills_for(user_id))

        partners: list[PartnerMatch] = []
        for other in directory.users:
            if other.id == user_id:
                continue

            their_offered, their_wanted = _split_by_type(directory.skills_for(other.id))
            their_offered_categories = {s.category for s in their_offered}
            my_offered_categories = {s.category for s in my_offered}

            they_offer_i_want = [
                s for s in my_wanted if s.category in their_offered_categories
            ]
            i_offer_they_want = [
                s for s in their_wanted if s.category in my_offered_categories
            ]

            score = PARTNER_POINTS_PER_OVERLAP * (
                len(they_offer_i_want) + len(i_offer_they_want)
            )
            if score <= 0:
                continue

            reasons: list[str] = []
            if they_offer_i_want:
                reasons.append(
                    f"They offer: {', '.join(s.title for s in they_offer_i_want)}"
                )
            if i_offer_they_want:
                reasons.append(
                    f"They want: {', '.join(s.title for s in i_offer_they_want)}"
                )

            partners.append(
                PartnerMatch(
                    user=other,
                    skills_offered=their_offered,
                    skills_wanted=their_wanted,
                    match_score=score,
                    match_reasons=" | ".join(reasons),
                )
            )

        partners.sort(key=lambda p: p.match_score, reverse=True)
        logger.info(f"Found {len(partners)} partner(s) for user {user_id}")
        return partners[:limit]


def _split_by_type(skills: list[Skill]) -> tuple[list[Skill], list[Skill]]:
    offered = [s for s in skills if s.type == SkillType.OFFER]
    wanted = [s for s in skills if s.type == SkillType.WANT]
    return offered, wanted
