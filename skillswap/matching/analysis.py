"""Summary statistics and advice for a batch of match results."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from skillswap.matching.config import MatchingConfig, get_matching_config
from skillswap.matching.models import (
    CategoryCount,
    CompatibilityResult,
    PatternAnalysis,
)

GAP_COMPLEMENTARY = "Consider developing complementary skills"
GAP_CATEGORIES = "Explore skills in different categories for better matching"

RECOMMEND_EXPAND = "Excellent match quality! Consider expanding your skill portfolio"
RECOMMEND_REFINE = "Good matches available. Try refining your skill descriptions"
RECOMMEND_DIVERSIFY = "Consider adding more diverse skills to improve matching"
RECOMMEND_FILTER = "Many potential matches found! Use filters to narrow down results"
RECOMMEND_BROADEN = "Few matches available. Consider broadening your skill categories"


def count_categories(categories: Sequence[str], limit: int) -> list[CategoryCount]:
    """Return the `limit` most frequent categories, ties in first-seen order."""
    # Counter keeps insertion order and sorted() is stable.
    ranked = sorted(Counter(categories).items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryCount(category=category, count=count)
        for category, count in ranked[:limit]
    ]


def find_skill_gaps(results: Sequence[CompatibilityResult]) -> list[str]:
    gaps: list[str] = []

    if any(r.score < 80 for r in results):
        gaps.append(GAP_COMPLEMENTARY)

    if len({r.skill_category for r in results}) < 3:
        gaps.append(GAP_CATEGORIES)

    return gaps


def build_recommendations(
    results: Sequence[CompatibilityResult], average_compatibility: float
) -> list[str]:
    recommendations: list[str] = []

    if average_compatibility > 85:
        recommendations.append(RECOMMEND_EXPAND)
    elif average_compatibility > 70:
        recommendations.append(RECOMMEND_REFINE)
    else:
        recommendations.append(RECOMMEND_DIVERSIFY)

    if len(results) > 10:
        recommendations.append(RECOMMEND_FILTER)
    elif len(results) < 3:
        recommendations.append(RECOMMEND_BROADEN)

    return recommendations


def analyze_match_patterns(
    results: Sequence[CompatibilityResult],
    config: MatchingConfig | None = None,
) -> PatternAnalysis:
    """Summarize a batch of results.

    An empty batch yields an average of 0 and no top categories.
    """
    config = config or get_matching_config()

    top_categories = count_categories(
        [r.skill_category for r in results], config.top_category_count
    )
    average = sum(r.score for r in results) / len(results) if results else 0.0

    return PatternAnalysis(
        top_categories=top_categories,
        average_compatibility=average,
        skill_gaps=find_skill_gaps(results),
        recommendations=build_recommendations(results, average),
    )
