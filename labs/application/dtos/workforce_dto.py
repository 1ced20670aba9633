"""DTOs for records attached to one employee of a company."""

from typing import Optional
from uuid import UUID

from pydantic import Field, model_validator

from labs.domain.entities.workforce import (
    MissionOrder,
    Notification,
    Presence,
    TrainingRequest,
    UserExperience,
)

from .common import APIModel, UTCDateTime


class PresenceCreateDTO(APIModel):
    matricule: int = Field(ge=0, description="Badge number of the employee")
    check: UTCDateTime = Field(description="Moment of the badge check")


class PresenceUpdateDTO(APIModel):
    matricule: Optional[int] = Field(default=None, ge=0)
    check: Optional[UTCDateTime] = None


class PresenceDTO(APIModel):
    id: UUID
    matricule: int
    check: Optional[UTCDateTime] = None
    user_id: UUID
    created_at: UTCDateTime

    @classmethod
    def from_entity(cls, presence: Presence) -> "PresenceDTO":
        return cls(
            id=presence.id,
            matricule=presence.matricule,
            check=presence.check,
            user_id=presence.user_id,
            created_at=presence.created_at,
        )


class MissionOrderCreateDTO(APIModel):
    object: str = Field(min_length=2, max_length=100)
    description: str = Field(min_length=2, max_length=500)
    start_date: UTCDateTime
    end_date: UTCDateTime
    address_client: str = Field(min_length=2, max_length=255)
    transport: str = Field(min_length=2, max_length=60)

    @model_validator(mode="after")
    def _check_mission_period(self) -> "MissionOrderCreateDTO":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class MissionOrderUpdateDTO(APIModel):
    object: Optional[str] = Field(default=None, min_length=2, max_length=100)
    description: Optional[str] = Field(default=None, min_length=2, max_length=500)
    start_date: Optional[UTCDateTime] = None
    end_date: Optional[UTCDateTime] = None
    address_client: Optional[str] = Field(default=None, min_length=2, max_length=255)
    transport: Optional[str] = Field(default=None, min_length=2, max_length=60)


class MissionOrderDTO(APIModel):
    id: UUID
    object: str
    description: str
    start_date: Optional[UTCDateTime] = None
    end_date: Optional[UTCDateTime] = None
    address_client: str
    transport: str
    user_id: UUID
    created_at: UTCDateTime

    @classmethod
    def from_entity(cls, mission: MissionOrder) -> "MissionOrderDTO":
        return cls(
            id=mission.id,
            object=mission.object,
            description=mission.description,
            start_date=mission.start_date,
            end_date=mission.end_date,
            address_client=mission.address_client,
            transport=mission.transport,
            user_id=mission.user_id,
            created_at=mission.created_at,
        )


class TrainingRequestCreateDTO(APIModel):
    training_title: str = Field(min_length=2, max_length=100)
    description: str = Field(min_length=2, max_length=500)
    reason: str = Field(min_length=2, max_length=500)
    request_date: Optional[UTCDateTime] = Field(
        default=None, description="Defaults to the creation time"
    )


class TrainingRequestUpdateDTO(APIModel):
    """Company decision on a training request; the other fields stay editable."""

    decision_company: Optional[str] = Field(default=None, min_length=2, max_length=60)
    training_title: Optional[str] = Field(default=None, min_length=2, max_length=100)
    description: Optional[str] = Field(default=None, min_length=2, max_length=500)
    reason: Optional[str] = Field(default=None, min_length=2, max_length=500)
    request_date: Optional[UTCDateTime] = None


class TrainingRequestDTO(APIModel):
    id: UUID
    training_title: str
    description: str
    reason: str
    request_date: Optional[UTCDateTime] = None
    decision_company: Optional[str] = None
    user_id: UUID
    created_at: UTCDateTime

    @classmethod
    def from_entity(cls, request: TrainingRequest) -> "TrainingRequestDTO":
        return cls(
            id=request.id,
            training_title=request.training_title,
            description=request.description,
            reason=request.reason,
            request_date=request.request_date,
            decision_company=request.decision_company,
            user_id=request.user_id,
            created_at=request.created_at,
        )


class NotificationUpdateDTO(APIModel):
    seen: bool


class NotificationDTO(APIModel):
    id: UUID
    type: str
    content: str
    seen: bool
    created_at: UTCDateTime

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationDTO":
        return cls(
            id=notification.id,
            type=notification.type,
            content=notification.content,
            seen=notification.seen,
            created_at=notification.created_at,
        )


class UserExperienceCreateDTO(APIModel):
    professional_training: str = Field(min_length=2, max_length=255)


class UserExperienceUpdateDTO(APIModel):
    professional_training: Optional[str] = Field(
        default=None, min_length=2, max_length=255
    )


class UserExperienceDTO(APIModel):
    id: UUID
    professional_training: str
    user_id: UUID
    created_at: UTCDateTime

    @classmethod
    def from_entity(cls, experience: UserExperience) -> "UserExperienceDTO":
        return cls(
            id=experience.id,
            professional_training=experience.professional_training,
            user_id=experience.user_id,
            created_at=experience.created_at,
        )
