"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

NOW = datetime(2026, 10, 16, 12, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Give every test fresh configuration singletons."""
    from skillswap.config.settings import reset_settings
    from skillswap.matching.config import reset_matching_config

    reset_settings()
    reset_matching_config()
    yield
    reset_settings()
    reset_matching_config()


@pytest.fixture
def now() -> datetime:
    """Fixed evaluation time for recency-sensitive scoring."""
    return NOW


@pytest.fixture
def make_skill():
    """Factory for Skill instances with overridable fields."""
    from skillswap.matching.models import Skill

    def _make(
        skill_id: str = "s1",
        *,
        owner_id: str = "u1",
        title: str = "Python",
        category: str = "Programming",
        level: str = "Intermediate",
        type: str = "want",
        age_days: float = 0,
    ) -> Skill:
        return Skill(
            id=skill_id,
            owner_id=owner_id,
            title=title,
            category=category,
            level=level,
            type=type,
            created_at=NOW - timedelta(days=age_days),
        )

    return _make


@pytest.fixture
def make_candidate(make_skill):
    """Factory for MatchCandidate instances owned by another user."""
    from skillswap.matching.models import MatchCandidate, SkillOwner

    def _make(
        skill_id: str = "c1",
        *,
        owner_id: str = "u2",
        name: str = "Grace",
        **skill_fields,
    ) -> MatchCandidate:
        skill_fields.setdefault("type", "offer")
        skill = make_skill(skill_id, owner_id=owner_id, **skill_fields)
        owner = SkillOwner(id=owner_id, name=name, email=f"{owner_id}@example.com")
        return MatchCandidate(skill=skill, owner=owner)

    return _make


@pytest.fixture
def directory_yaml(tmp_path):
    """A small skill directory written to disk as YAML."""
    path = tmp_path / "skills.yaml"
    path.write_text(
        """
users:
  - id: u1
    name: Ada
    email: ada@example.com
    skills:
      - id: s1
        title: Learn Django
        category: Programming
        level: Intermediate
        type: want
        created_at: 2026-10-15T12:00:00+00:00
      - id: s2
        title: Portrait Photography
        category: Photography
        level: Advanced
        type: offer
        created_at: 2026-09-01T12:00:00+00:00
  - id: u2
    name: Grace
    email: grace@example.com
    bio: Backend engineer
    skills:
      - id: s3
        title: Python Web Apps
        category: Programming
        level: Advanced
        type: offer
        created_at: 2026-10-14T12:00:00+00:00
      - id: s4
        title: Wedding Photos
        category: Photography
        level: Beginner
        type: want
        created_at: 2026-10-10T12:00:00+00:00
  - id: u3
    name: Linus
    email: linus@example.com
    skills:
      - id: s5
        title: Home Cooking
        category: Cooking
        level: Expert
        type: offer
        created_at: 2026-09-16T12:00:00+00:00
""".lstrip(),
        encoding="utf-8",
    )
    return path
