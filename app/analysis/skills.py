from __future__ import annotations

from dataclasses import dataclass

from .patterns import MAX_MISSING_SKILLS, POPULAR_SKILLS, SKILL_PATTERNS
from .utils import unique_in_order


@dataclass(frozen=True, slots=True)
class SkillSet:
    programming: tuple[str, ...] = ()
    frameworks: tuple[str, ...] = ()
    databases: tuple[str, ...] = ()
    cloud: tuple[str, ...] = ()
    tools: tuple[str, ...] = ()
    soft_skills: tuple[str, ...] = ()

    def categories(self) -> dict[str, list[str]]:
        return {
            "programming": list(self.programming),
            "frameworks": list(self.frameworks),
            "databases": list(self.databases),
            "cloud": list(self.cloud),
            "tools": list(self.tools),
            "soft_skills": list(self.soft_skills),
        }

    @property
    def present(self) -> list[str]:
        return unique_in_order(
            self.programming
            + self.frameworks
            + self.databases
            + self.cloud
            + self.tools
            + self.soft_skills
        )


def extract_skills(text: str) -> SkillSet:
    """Match every category keyword against lower-cased text.

    The recorded value is the substring that matched (``node.js`` or
    ``nodejs``), not the keyword itself.
    """
    lowered = text.lower()
    found: dict[str, tuple[str, ...]] = {}
    for category, patterns in SKILL_PATTERNS.items():
        hits: list[str] = []
        for pattern in patterns:
            match = pattern.search(lowered)
            if match:
                hits.append(match.group(0))
        found[category] = tuple(unique_in_order(hits))
    return SkillSet(**found)


def recommended_skills(text: str) -> list[str]:
    lowered = text.lower()
    missing = [skill for skill in POPULAR_SKILLS if skill.lower() not in lowered]
    return missing[:MAX_MISSING_SKILLS]
