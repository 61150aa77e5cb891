from .entities import Project, Decision
from .enums import ProjectStatus, DecisionType
from .value_objects import ProjectName, ProjectIdentity
from .repositories import ProjectRepository, DecisionRepository

__all__ = [
    "Project",
    "Decision",
    "ProjectStatus",
    "DecisionType",
    "ProjectName",
    "ProjectIdentity",
    "ProjectRepository",
    "DecisionRepository",
]
