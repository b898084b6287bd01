"""Aggregate view of everything rendered on the portfolio page."""

from typing import List, Optional

from .achievement import AchievementRead
from .base import CamelModel
from .contact import ContactRead
from .education import EducationRead
from .experience import ExperienceRead
from .profile import ProfileRead
from .project import ProjectRead
from .skill import SkillRead


class PortfolioRead(CamelModel):
    profile: Optional[ProfileRead] = None
    projects: List[ProjectRead]
    educations: List[EducationRead]
    skills: List[SkillRead]
    experiences: List[ExperienceRead]
    achievements: List[AchievementRead]
    contact: Optional[ContactRead] = None
