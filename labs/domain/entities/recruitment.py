"""
Domain Entities - Recruitment

Candidates ("condidats"), interns, projects candidates are assigned to and
the question bank used to build tests.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from .base import Entity


@dataclass
class Candidate(Entity):
    """An applicant; can sign in to take tests."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    university: Optional[str] = None
    education_level: Optional[str] = None
    address: Optional[str] = None
    status: bool = True
    company_id: Optional[UUID] = None


@dataclass
class Intern(Entity):
    """An intern followed by a supervisor of the company."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    date_of_birth: Optional[datetime] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    country_code: Optional[str] = None
    education_level: Optional[str] = None
    university: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    cv_path: Optional[str] = None
    educational_supervisor_name: Optional[str] = None
    educational_supervisor_phone: Optional[str] = None
    educational_supervisor_email: Optional[str] = None
    supervisor_id: Optional[UUID] = None
    company_id: Optional[UUID] = None


@dataclass
class Project(Entity):
    """A project identified by a company-unique code."""

    name: str = ""
    code: str = ""
    description: str = ""
    specialty: Optional[str] = None
    technologies: List[str] = field(default_factory=list)
    expires_at: Optional[datetime] = None
    company_id: Optional[UUID] = None


@dataclass
class ProjectCandidate(Entity):
    """Assignment of a candidate to a project. The newest assignment wins."""

    project_id: Optional[UUID] = None
    candidate_id: Optional[UUID] = None
    company_id: Optional[UUID] = None


@dataclass
class Question(Entity):
    """A multiple-choice question tagged with one technology."""

    question: str = ""
    correct_answer: str = ""
    options: List[str] = field(default_factory=list)
    associated_technology: str = ""
    company_id: Optional[UUID] = None
