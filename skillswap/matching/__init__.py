"""Skill match scoring.

Public API:
    - score_compatibility: Score one skill against another
    - find_matches: Score a user's skills against a candidate pool
    - analyze_match_patterns: Summarize a batch of results
    - generate_match_notifications: Notification payloads for a batch
    - MatchingService: Per-user match reports and partner suggestions
    - SkillDirectoryService: Load a skill directory from YAML/JSON
    - MatchingConfig: Configuration settings
"""

from skillswap.matching.analysis import analyze_match_patterns
from skillswap.matching.config import (
    MatchingConfig,
    get_matching_config,
    reset_matching_config,
)
from skillswap.matching.directory import (
    SkillDirectory,
    SkillDirectoryService,
    UserNotFoundError,
)
from skillswap.matching.models import (
    CompatibilityResult,
    CompatibilityScore,
    MatchCandidate,
    MatchNotification,
    MatchPreferences,
    MatchReport,
    PartnerMatch,
    PatternAnalysis,
    Skill,
    SkillLevel,
    SkillOwner,
    SkillType,
)
from skillswap.matching.notifications import generate_match_notifications
from skillswap.matching.scorer import find_matches, score_compatibility
from skillswap.matching.service import MatchingService

__all__ = [
    "score_compatibility",
    "find_matches",
    "analyze_match_patterns",
    "generate_match_notifications",
    "MatchingService",
    "SkillDirectory",
    "SkillDirectoryService",
    "UserNotFoundError",
    "Skill",
    "SkillLevel",
    "SkillType",
    "SkillOwner",
    "MatchCandidate",
    "MatchPreferences",
    "CompatibilityScore",
    "CompatibilityResult",
    "PatternAnalysis",
    "MatchNotification",
    "MatchReport",
    "PartnerMatch",
    "MatchingConfig",
    "get_matching_config",
    "reset_matching_config",
]
