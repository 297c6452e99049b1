from .user import User
from .website import Website
from .section_category import SectionCategory
from .section import SectionTemplate
from .section_variant import SectionVariant
from .project_section import ProjectSection

__all__ = [
    "User",
    "Website",
    "SectionCategory",
    "SectionTemplate",
    "SectionVariant",
    "ProjectSection",
]
