"""Configuration settings for skill match scoring."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MatchingConfig(BaseSettings):
    """Match scoring configuration settings.

    Defaults reproduce the production scoring heuristic. Every value can be
    overridden via environment variables with `MATCHING_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="MATCHING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Category term
    same_category_points: Annotated[float, Field(ge=0.0)] = Field(
        default=40.0,
        description="Points when both skills share a category",
    )
    related_category_points: Annotated[float, Field(ge=0.0)] = Field(
        default=25.0,
        description="Points when categories are related",
    )

    # Level term. The sub-score is scaled before it is added, so its
    # contribution tops out at level_same_points * level_scale.
    level_same_points: Annotated[float, Field(ge=0.0)] = Field(default=30.0)
    level_adjacent_points: Annotated[float, Field(ge=0.0)] = Field(default=25.0)
    level_two_apart_points: Annotated[float, Field(ge=0.0)] = Field(default=15.0)
    level_far_points: Annotated[float, Field(ge=0.0)] = Field(default=5.0)
    level_scale: Annotated[float, Field(ge=0.0)] = Field(
        default=0.3,
        description="Multiplier applied to the level sub-score",
    )
    level_reason_threshold: Annotated[float, Field(ge=0.0)] = Field(
        default=20.0,
        description="Unscaled level sub-score above which a level reason is given",
    )

    # Type, recency and preference terms
    complementary_type_points: Annotated[float, Field(ge=0.0)] = Field(
        default=20.0,
        description="Points when one skill is offered and the other wanted",
    )
    recency_points: Annotated[float, Field(ge=0.0)] = Field(
        default=10.0,
        description="Points for a recently posted candidate skill",
    )
    recency_window_days: Annotated[int, Field(ge=0)] = Field(
        default=7,
        description="Whole days since posting below which a skill is recent",
    )
    preferred_category_points: Annotated[float, Field(ge=0.0)] = Field(default=15.0)
    preferred_level_points: Annotated[float, Field(ge=0.0)] = Field(default=10.0)

    # Thresholds
    max_score: Annotated[float, Field(gt=0.0, le=100.0)] = Field(
        default=100.0,
        description="Cap applied to the summed score",
    )
    match_threshold: Annotated[float, Field(ge=0.0)] = Field(
        default=70.0,
        description="Minimum score for a pair to be reported as a match",
    )
    high_match_threshold: Annotated[float, Field(ge=0.0)] = Field(
        default=90.0,
        description="Score a match must exceed to trigger a high-match notification",
    )
    top_category_count: Annotated[int, Field(gt=0)] = Field(default=5)
    trending_category_count: Annotated[int, Field(gt=0)] = Field(default=3)

    attach_reasons: bool = Field(
        default=False,
        description="Copy the scorer's reasons onto batch results",
    )

    @model_validator(mode="after")
    def validate_thresholds_within_cap(self) -> MatchingConfig:
        """Ensure no threshold sits above the score cap."""
        for name in ("match_threshold", "high_match_threshold"):
            value = getattr(self, name)
            if value > self.max_score:
                raise ValueError(
                    f"{name} must not exceed max_score "
                    f"(got {value}, max_score={self.max_score})"
                )
        return self


# Singleton instance for easy import
_matching_config: MatchingConfig | None = None


def get_matching_config() -> MatchingConfig:
    """Get the matching configuration singleton."""
    global _matching_config
    if _matching_config is None:
        _matching_config = MatchingConfig()
    return _matching_config


def reset_matching_config() -> None:
    """Reset the matching configuration singleton (useful for testing)."""
    global _matching_config
    _matching_config = None
