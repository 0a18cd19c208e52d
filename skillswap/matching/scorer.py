"""Pairwise compatibility scoring and batch match finding.

Scores are a weighted sum of independent terms (category, level, type,
recency, preferences) capped at `max_score`. Every function here is pure
apart from reading the clock when `now` is not supplied, and none of them
raise for well-shaped input: unknown levels or categories simply earn no
points.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

from skillswap.matching.config import MatchingConfig, get_matching_config
from skillswap.matching.models import (
    CompatibilityResult,
    CompatibilityScore,
    MatchCandidate,
    MatchPreferences,
    Skill,
)
from skillswap.matching.taxonomy import are_related_categories, level_distance
from skillswap.utils.logging import get_logger

logger = get_logger(__name__)

_SECONDS_PER_DAY = 60 * 60 * 24


def level_compatibility(
    level1: str, level2: str, config: MatchingConfig | None = None
) -> float:
    """Return the unscaled level sub-score for two skill levels."""
    config = config or get_matching_config()
    distance = level_distance(level1, level2)

    if distance is None:
        return 0.0
    if distance == 0:
        return config.level_same_points
    # One level apart is the ideal teaching gap.
    if distance == 1:
        return config.level_adjacent_points
    if distance == 2:
        return config.level_two_apart_points
    return config.level_far_points


def days_since(created_at: datetime, now: datetime | None = None) -> int:
    """Return whole days elapsed since `created_at`, floored."""
    now = now or datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    elapsed = (now - created_at).total_seconds()
    return int(elapsed // _SECONDS_PER_DAY)


def score_compatibility(
    subject: Skill,
    candidate: Skill,
    preferences: MatchPreferences | None = None,
    *,
    now: datetime | None = None,
    config: MatchingConfig | None = None,
) -> CompatibilityScore:
    """Score how well `candidate` pairs with the subject's skill.

    Args:
        subject: The requesting user's skill.
        candidate: Another user's skill.
        preferences: Optional category/level boosts.
        now: Evaluation time for the recency term (defaults to the clock).
        config: Scoring weights (defaults to the configuration singleton).

    Returns:
        The capped score and the reasons that contributed, in evaluation order.
    """
    config = config or get_matching_config()
    preferences = preferences or MatchPreferences()

    score = 0.0
    reasons: list[str] = []

    if subject.category == candidate.category:
        score += config.same_category_points
        reasons.append("Same skill category")
    elif are_related_categories(subject.category, candidate.category):
        score += config.related_category_points
        reasons.append("Related skill categories")

    level_score = level_compatibility(subject.level, candidate.level, config)
    score += level_score * config.level_scale
    if level_score > config.level_reason_threshold:
        reasons.append("Compatible skill levels")

    if subject.type != candidate.type:
        score += config.complementary_type_points
        reasons.append("Complementary skill types (offer <-> want)")

    if days_since(candidate.created_at, now) < config.recency_window_days:
        score += config.recency_points
        reasons.append("Recently posted")

    if candidate.category in (preferences.preferred_categories or []):
        score += config.preferred_category_points
        reasons.append("Matches your preferred categories")

    if candidate.level in (preferences.preferred_levels or []):
        score += config.preferred_level_points
        reasons.append("Matches your preferred skill levels")

    return CompatibilityScore(score=min(score, config.max_score), reasons=reasons)


def is_scorable_pair(
    subject_user_id: str, subject: Skill, candidate: MatchCandidate
) -> bool:
    """Return True if the pair may be scored at all.

    A user is never matched with themselves, and two offers (or two wants)
    never make an exchange.
    """
    if subject_user_id in (candidate.user_id, candidate.skill.owner_id):
        return False
    return subject.type != candidate.skill.type


def find_matches(
    subject_user_id: str,
    subject_skills: Iterable[Skill],
    candidates: Sequence[MatchCandidate],
    preferences: MatchPreferences | None = None,
    *,
    now: datetime | None = None,
    config: MatchingConfig | None = None,
) -> list[CompatibilityResult]:
    """Score every eligible pair and return those at or above the threshold.

    A candidate skill appears once per subject skill it qualifies against.
    Results are sorted by score, highest first; ties keep generation order
    (subject skill first, then candidate).
    """
    config = config or get_matching_config()
    now = now or datetime.now(UTC)

    matches: list[CompatibilityResult] = []
    scored = 0

    for subject in subject_skills:
        for candidate in candidates:
            if not is_scorable_pair(subject_user_id, subject, candidate):
                continue

            scored += 1
            compatibility = score_compatibility(
                subject, candidate.skill, preferences, now=now, config=config
            )
            if compatibility.score < config.match_threshold:
                continue

            matches.append(
                CompatibilityResult(
                    candidate_user_id=candidate.user_id,
                    candidate_skill_id=candidate.skill.id,
                    score=compatibility.score,
                    reasons=list(compatibility.reasons)
                    if config.attach_reasons
                    else [],
                    subject_skill_id=subject.id,
                    user_name=candidate.owner.name,
                    user_email=candidate.owner.email,
                    skill_title=candidate.skill.title,
                    skill_category=candidate.skill.category,
                    skill_level=candidate.skill.level,
                )
            )

    logger.debug(
        "Scored %d pair(s) for user %s; %d at or above %.1f",
        scored,
        subject_user_id,
        len(matches),
        config.match_threshold,
    )

    return sorted(matches, key=lambda m: m.score, reverse=True)
