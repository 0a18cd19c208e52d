"""Static skill taxonomy: related categories and the level scale."""

from __future__ import annotations

from types import MappingProxyType

from skillswap.matching.models import SkillLevel

_RELATED_CATEGORIES: MappingProxyType[str, frozenset[str]] = MappingProxyType(
    {
        "Programming": frozenset(
            {"Web Development", "Mobile Development", "Data Science", "DevOps"}
        ),
        "Web Development": frozenset({"Programming", "Design", "DevOps"}),
        "Mobile Development": frozenset({"Programming", "Design", "UI/UX"}),
        "Design": frozenset(
            {"UI/UX", "Web Development", "Mobile Development", "Marketing"}
        ),
        "UI/UX": frozenset({"Design", "Web Development", "Mobile Development"}),
        "Data Science": frozenset({"Programming", "Analytics", "Machine Learning"}),
        "Marketing": frozenset({"Design", "Content Creation", "Social Media"}),
        "Content Creation": frozenset({"Marketing", "Writing", "Video Production"}),
        "Writing": frozenset({"Content Creation", "Marketing", "Translation"}),
        "Music": frozenset({"Audio Production", "Performance", "Composition"}),
        "Photography": frozenset({"Video Production", "Design", "Marketing"}),
        "Video Production": frozenset(
            {"Photography", "Content Creation", "Marketing"}
        ),
    }
)

LEVEL_SCALE: tuple[str, ...] = tuple(level.value for level in SkillLevel)


def related_categories(category: str) -> frozenset[str]:
    """Return the categories listed as related to `category` (one direction)."""
    return _RELATED_CATEGORIES.get(category, frozenset())


def are_related_categories(category1: str, category2: str) -> bool:
    """Return True if either category lists the other as related."""
    return category2 in related_categories(category1) or category1 in (
        related_categories(category2)
    )


def level_index(level: str) -> int | None:
    """Return the position of `level` on the scale, or None if unrecognised."""
    try:
        return LEVEL_SCALE.index(level)
    except ValueError:
        return None


def level_distance(level1: str, level2: str) -> int | None:
    """Return how many steps apart two levels are, or None if either is unknown."""
    index1 = level_index(level1)
    index2 = level_index(level2)
    if index1 is None or index2 is None:
        return None
    return abs(index1 - index2)
