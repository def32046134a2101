from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from core.exceptions import InvalidInputError, UnknownTemplateError
from core.logger import get_logger
from core.report_generator import build_quick_report_from_payload, build_report_from_payload
from core.templates import apply_template, list_templates

router = APIRouter()
logger = get_logger("api.reports")


class ActivityPayload(BaseModel):
    id: str = ""
    type: str
    start_time: str
    end_time: Optional[str] = None
    duration: Optional[int] = None  # minutes; derived from start/end when omitted
    notes: Optional[str] = None
    skills_worked: List[str] = Field(default_factory=list)


class SkillAssessmentPayload(BaseModel):
    skill_id: str = ""
    skill_name: str
    level: int
    previous_level: Optional[int] = None


class DogPayload(BaseModel):
    name: str
    breed: str = ""
    program_name: str = ""
    program_day: int = 1
    total_program_days: int = 1


class ReportRequest(BaseModel):
    activities: List[ActivityPayload] = Field(default_factory=list)
    skill_assessments: List[SkillAssessmentPayload] = Field(default_factory=list)
    dog: DogPayload


class QuickReportRequest(BaseModel):
    dog_name: str
    activities: List[ActivityPayload] = Field(default_factory=list)


def _bad_request(e: InvalidInputError) -> HTTPException:
    logger.info("Rejected report input: %s", e.message)
    return HTTPException(status_code=400, detail=e.get_user_message())


def _activity_dicts(activities: List[ActivityPayload]) -> List[Dict[str, Any]]:
    # Drop unset fields so a missing duration can be derived from the timestamps
    return [a.model_dump(exclude_none=True) for a in activities]


@router.post("/generate")
def generate(request: ReportRequest):
    payload = {
        "activities": _activity_dicts(request.activities),
        "skill_assessments": [s.model_dump() for s in request.skill_assessments],
        "dog": request.dog.model_dump(),
    }
    try:
        report = build_report_from_payload(payload)
    except InvalidInputError as e:
        raise _bad_request(e)
    return report.to_dict()


@router.post("/quick")
def quick(request: QuickReportRequest):
    payload = {
        "dog_name": request.dog_name,
        "activities": _activity_dicts(request.activities),
    }
    try:
        report = build_quick_report_from_payload(payload)
    except InvalidInputError as e:
        raise _bad_request(e)
    return report.to_dict()


@router.get("/templates")
def get_templates():
    return {"templates": list_templates()}


@router.get("/templates/{template_key}")
def get_template(template_key: str, dog_name: str):
    try:
        report = apply_template(template_key, dog_name)
    except UnknownTemplateError as e:
        raise HTTPException(status_code=404, detail=e.get_user_message())
    return report.to_dict()
