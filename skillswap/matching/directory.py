"""Skill directory loading.

A skill directory is a YAML or JSON document listing users and the skills
they offer or want. It stands in for the data-access layer: it answers
"what are this user's skills" and "which skills could they be matched with".

Example:

    users:
      - id: u1
        name: Ada
        email: ada@example.com
        skills:
          - id: s1
            title: Python
            category: Programming
            level: Advanced
            type: offer
            created_at: 2026-10-01T09:00:00Z
"""

from __future__ import annotations

import json
from collections import Counter
from datetime import UTC, datetime
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from skillswap.config.settings import Settings, get_settings
from skillswap.matching.analysis import count_categories
from skillswap.matching.models import (
    CategoryCount,
    MatchCandidate,
    Skill,
    SkillOwner,
    SkillType,
)


class UserNotFoundError(LookupError):
    """Raised when a user id is not present in the directory."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class SkillEntry(BaseModel):
    """A skill as written in the directory document (owner implied)."""

    id: str
    title: str
    category: str
    level: str
    type: SkillType
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class DirectoryUser(BaseModel):
    """A user and their listed skills."""

    id: str
    name: str
    email: str
    bio: str | None = None
    skills: list[SkillEntry] = Field(default_factory=list)

    @property
    def owner(self) -> SkillOwner:
        return SkillOwner(id=self.id, name=self.name, email=self.email, bio=self.bio)


class DirectoryDocument(BaseModel):
    """Top-level shape of a directory document."""

    users: list[DirectoryUser] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_ids(self) -> DirectoryDocument:
        """Reject duplicate user or skill ids."""
        user_ids = [u.id for u in self.users]
        duplicates = sorted(k for k, n in Counter(user_ids).items() if n > 1)
        if duplicates:
            raise ValueError(f"Duplicate user ids: {', '.join(duplicates)}")

        skill_ids = [s.id for u in self.users for s in u.skills]
        duplicates = sorted(k for k, n in Counter(skill_ids).items() if n > 1)
        if duplicates:
            raise ValueError(f"Duplicate skill ids: {', '.join(duplicates)}")
        return self


class SkillDirectory:
    """In-memory view over a validated directory document."""

    def __init__(self, users: list[DirectoryUser]) -> None:
        self._owners: dict[str, SkillOwner] = {}
        self._skills: dict[str, list[Skill]] = {}

        for user in users:
            self._owners[user.id] = user.owner
            self._skills[user.id] = [
                Skill(owner_id=user.id, **entry.model_dump()) for entry in user.skills
            ]

    @classmethod
    def from_document(cls, document: DirectoryDocument) -> SkillDirectory:
        return cls(document.users)

    @property
    def users(self) -> list[SkillOwner]:
        return list(self._owners.values())

    def get_user(self, user_id: str) -> SkillOwner:
        """Return a user's public identity."""
        try:
            return self._owners[user_id]
        except KeyError:
            raise UserNotFoundError(user_id) from None

    def skills_for(self, user_id: str) -> list[Skill]:
        """Return a user's skills (empty for unknown users)."""
        return list(self._skills.get(user_id, []))

    def candidates_for(self, user_id: str) -> list[MatchCandidate]:
        """Return every other user's skills joined with their owner."""
        return [
            MatchCandidate(skill=skill, owner=self._owners[owner_id])
            for owner_id, skills in self._skills.items()
            if owner_id != user_id
            for skill in skills
        ]

    def all_skills(self) -> list[Skill]:
        return [skill for skills in self._skills.values() for skill in skills]

    def category_counts(self, limit: int = 5) -> list[CategoryCount]:
        """Return the most listed categories across all users, most first."""
        return count_categories(
            [skill.category for skill in self.all_skills()], limit
        )


class SkillDirectoryService:
    """Service for loading and validating skill directories."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def load(self, path: Path | str | None = None) -> SkillDirectory:
        """Load and validate a directory from YAML or JSON."""
        directory_path = (
            Path(path) if path is not None else self.settings.directory_path
        )
        if not directory_path.exists():
            raise FileNotFoundError(f"Skill directory not found: {directory_path}")

        suffix = directory_path.suffix.lower()
        if suffix in {".yaml", ".yml"}:
            data = self._load_yaml(directory_path)
        elif suffix == ".json":
            data = self._load_json(directory_path)
        else:
            data = self._load_unknown(directory_path)

        document = DirectoryDocument.model_validate(data)
        return SkillDirectory.from_document(document)

    def _load_yaml(self, path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML skill directory: {path}") from e

        return self._require_mapping(data, path)

    def _load_json(self, path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON skill directory: {path}") from e

        return self._require_mapping(data, path)

    def _load_unknown(self, path: Path) -> dict:
        """Load a directory whose file extension does not say its format."""
        raw = path.read_text(encoding="utf-8")

        # JSON is a subset of YAML, so YAML parses both.
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid skill directory format: {path}") from e

        return self._require_mapping(data, path)

    @staticmethod
    def _require_mapping(data: object, path: Path) -> dict:
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Skill directory must be a mapping/dict: {path}")
        return data
