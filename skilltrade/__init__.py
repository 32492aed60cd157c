"""SkillTrade API."""
