"""Question bank endpoints."""

from fastapi import APIRouter

from labs.application.dtos.question_dto import (
    QuestionCreateDTO,
    QuestionDTO,
    QuestionUpdateDTO,
)
from labs.main.container import AppContainer

from .crud_routes import add_company_crud_routes

router = APIRouter(prefix="/api/questions", tags=["questions"])

add_company_crud_routes(
    router,
    provider=AppContainer.question_management_use_case,
    resource="question",
    create_dto=QuestionCreateDTO,
    update_dto=QuestionUpdateDTO,
    item_dto=QuestionDTO,
    details_dto=QuestionDTO,
)
