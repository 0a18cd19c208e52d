"""SkillSwap: skill-exchange match scoring."""

__version__ = "0.1.0"
