"""DTOs for projects and candidate assignment."""

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from labs.domain.entities.recruitment import Project

from .common import APIModel, UTCDateTime


class ProjectCreateDTO(APIModel):
    code: str = Field(min_length=3, max_length=30)
    project_name: str = Field(min_length=3, max_length=35)
    description: str = Field(min_length=3, max_length=80)
    technologies: List[str] = Field(min_length=1)
    specialty: Optional[str] = Field(default=None, max_length=100)
    exp_date: Optional[UTCDateTime] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "code": "PRJ-API",
                "projectName": "Billing API",
                "description": "Invoicing backend",
                "technologies": ["python", "mongodb"],
                "specialty": "backend",
                "expDate": "2026-12-31T00:00:00Z",
            }
        }
    }


class ProjectUpdateDTO(APIModel):
    code: Optional[str] = Field(default=None, min_length=3, max_length=30)
    project_name: Optional[str] = Field(default=None, min_length=3, max_length=35)
    description: Optional[str] = Field(default=None, min_length=3, max_length=80)
    technologies: Optional[List[str]] = Field(default=None, min_length=1)
    specialty: Optional[str] = Field(default=None, max_length=100)
    exp_date: Optional[UTCDateTime] = None


class ProjectAssignDTO(APIModel):
    code: str = Field(min_length=3, max_length=30, description="Project code")


class ProjectDTO(APIModel):
    id: UUID
    code: str
    project_name: str
    description: str
    technologies: List[str]
    specialty: Optional[str] = None
    exp_date: Optional[UTCDateTime] = None
    created_at: UTCDateTime

    @classmethod
    def from_entity(cls, project: Project) -> "ProjectDTO":
        return cls(
            id=project.id,
            code=project.code,
            project_name=project.name,
            description=project.description,
            technologies=project.technologies,
            specialty=project.specialty,
            exp_date=project.expires_at,
            created_at=project.created_at,
        )
