"""Data models for skill match scoring."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SkillLevel(str, Enum):
    """Proficiency level of a skill, in ascending order."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class SkillType(str, Enum):
    """Whether a user offers a skill or wants to learn it."""

    OFFER = "offer"
    WANT = "want"


class Skill(BaseModel):
    """A skill listed by exactly one user."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Skill identifier")
    owner_id: str = Field(..., description="Identifier of the owning user")
    title: str = Field(..., description="Skill title")
    category: str = Field(..., description="Skill category")
    level: str = Field(
        ..., description="Skill level; unknown values are kept and score lowest"
    )
    type: SkillType = Field(..., description="offer or want")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the skill was posted",
    )

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        """Treat naive timestamps as UTC."""
        if v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> Skill:
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


class SkillOwner(BaseModel):
    """Public identity of a skill's owner."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    bio: str | None = None


class MatchCandidate(BaseModel):
    """A candidate skill joined with its owner's public identity."""

    model_config = ConfigDict(frozen=True)

    skill: Skill
    owner: SkillOwner

    @model_validator(mode="after")
    def validate_owner_matches_skill(self) -> MatchCandidate:
        """Ensure the joined owner is the skill's owner."""
        if self.skill.owner_id != self.owner.id:
            raise ValueError(
                f"Skill {self.skill.id} belongs to {self.skill.owner_id}, "
                f"not {self.owner.id}"
            )
        return self

    @property
    def user_id(self) -> str:
        return self.owner.id


class MatchPreferences(BaseModel):
    """Optional boosts applied on top of the base compatibility score.

    `max_distance` and `availability` are accepted for callers that send them
    but do not influence scoring.
    """

    preferred_categories: list[str] | None = None
    preferred_levels: list[str] | None = None
    max_distance: float | None = None
    availability: list[str] | None = None


@dataclass
class CompatibilityScore:
    """Pairwise score with the reasons that contributed, in evaluation order."""

    score: float
    reasons: list[str] = field(default_factory=list)


@dataclass
class CompatibilityResult:
    """A scored candidate skill for one of the subject's skills."""

    candidate_user_id: str
    candidate_skill_id: str
    score: float
    reasons: list[str] = field(default_factory=list)
    subject_skill_id: str = ""
    user_name: str = ""
    user_email: str = ""
    skill_title: str = ""
    skill_category: str = ""
    skill_level: str = ""

    def __post_init__(self) -> None:
        if not (0.0 <= self.score <= 100.0):
            raise ValueError(f"score must be between 0 and 100 (got {self.score})")

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


@dataclass
class CategoryCount:
    """Number of results in a category."""

    category: str
    count: int


@dataclass
class PatternAnalysis:
    """Summary statistics and advice derived from a batch of results."""

    top_categories: list[CategoryCount] = field(default_factory=list)
    average_compatibility: float = 0.0
    skill_gaps: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return asdict(self)


class NotificationKind(str, Enum):
    """Kinds of match notifications.

    NEW_MATCH and SKILL_GAP are part of the notification vocabulary consumed
    by clients but are not produced by the generator.
    """

    HIGH_MATCH = "high_match"
    NEW_MATCH = "new_match"
    TRENDING_SKILL = "trending_skill"
    SKILL_GAP = "skill_gap"


class NotificationPriority(str, Enum):
    """Display priority of a notification."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass
class MatchNotification:
    """A notification payload derived from match results."""

    kind: NotificationKind
    title: str
    message: str
    priority: NotificationPriority

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "kind": self.kind.value,
            "title": self.title,
            "message": self.message,
            "priority": self.priority.value,
        }


@dataclass
class UserStats:
    """Per-user totals reported alongside matches."""

    total_skills: int
    total_matches: int
    average_compatibility: float


@dataclass
class MatchReport:
    """Everything returned for a user's enhanced match request."""

    user_id: str
    matches: list[CompatibilityResult]
    analysis: PatternAnalysis
    notifications: list[MatchNotification]
    trending_skills: list[CategoryCount]
    user_stats: UserStats
    generated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "user_id": self.user_id,
            "matches": [m.to_dict() for m in self.matches],
            "analysis": self.analysis.to_dict(),
            "notifications": [n.to_dict() for n in self.notifications],
            "trending_skills": [asdict(t) for t in self.trending_skills],
            "user_stats": asdict(self.user_stats),
            "generated_at": self.generated_at.isoformat(),
        }


@dataclass
class PartnerMatch:
    """Another user whose offers and wants line up with the subject's."""

    user: SkillOwner
    skills_offered: list[Skill]
    skills_wanted: list[Skill]
    match_score: int
    match_reasons: str

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "user": {
                "id": self.user.id,
                "name": self.user.name,
                "bio": self.user.bio,
            },
            "skills_offered": [s.to_dict() for s in self.skills_offered],
            "skills_wanted": [s.to_dict() for s in self.skills_wanted],
            "match_score": self.match_score,
            "match_reasons": self.match_reasons,
        }
