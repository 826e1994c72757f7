from typing import Dict, List, Optional, Union

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
import uvicorn

from spicalc.config.settings import settings
from spicalc.core.errors import CourseInputError
from spicalc.core.spi import PriorHistory, calculate
from spicalc.logging_config import setup_logging
from spicalc.state.app_state import grade_table
from spicalc.state.course_list import CourseEntry


setup_logging(settings.log_level)

app = FastAPI(title="SPI Calculator API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CoursePayload(BaseModel):
    grade: Optional[str] = ""
    credit: Optional[Union[str, float]] = ""


class CalculatePayload(BaseModel):
    courses: List[CoursePayload] = Field(default_factory=list)
    prior_cpi: Optional[str] = ""
    prior_semesters: Optional[str] = ""


class CalculateResponse(BaseModel):
    spi: str
    cpi: Optional[str] = None
    total_credits: float
    error: Optional[str] = None


def _to_entry(course: CoursePayload) -> CourseEntry:
    credit = course.credit
    if credit is None:
        credit = ""
    elif not isinstance(credit, str):
        credit = str(credit)
    return CourseEntry(grade=course.grade or "", credit=credit)


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/grades")
def list_grades() -> List[Dict]:
    return [{"label": label, "points": points} for label, points in grade_table]


@app.post("/calculate", response_model=CalculateResponse)
def calculate_spi(payload: CalculatePayload) -> CalculateResponse:
    prior = None
    if settings.enable_cpi:
        prior = PriorHistory(payload.prior_cpi or "", payload.prior_semesters or "")
    try:
        result = calculate(
            [_to_entry(course) for course in payload.courses],
            grade_table,
            prior,
            max_cpi=settings.grade_scale_max,
        )
    except CourseInputError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc

    return CalculateResponse(
        spi=result.spi,
        cpi=result.cpi,
        total_credits=result.total_credits,
        error=result.error_text,
    )


def run() -> None:
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
