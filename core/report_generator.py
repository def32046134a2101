"""
Daily Report Generator for Kennel Report.

Composes the classifiers and generators into a report:
- generate_report: full report from activities, assessments and dog context
- generate_quick_report: classifier-only preview
- build_*_from_payload: same, from raw dict payloads validated at the boundary

Pure functions: no I/O, no clock, no randomness.
"""
from typing import Any, Dict, List, Sequence

from core.classifiers import (
    infer_appetite,
    infer_energy_level,
    infer_mood,
    infer_potty_status,
    total_minutes,
)
from core.exceptions import InvalidInputError
from core.generators import (
    collect_skills_practiced,
    generate_areas_to_improve,
    generate_highlights,
    generate_tomorrow_focus,
    generate_training_summary,
)
from core.logger import get_logger
from core.models import (
    Activity,
    ActivityType,
    DogContext,
    GeneratedReport,
    QuickReport,
    SkillAssessment,
)

logger = get_logger("report_generator")


def generate_report(
    activities: Sequence[Activity],
    skill_assessments: Sequence[SkillAssessment],
    dog: DogContext,
) -> GeneratedReport:
    mood = infer_mood(activities)
    # Computed once; summary and training_summary are the same paragraph
    summary = generate_training_summary(activities, skill_assessments, dog, mood=mood)

    report = GeneratedReport(
        summary=summary,
        mood=mood,
        energy_level=infer_energy_level(activities),
        appetite=infer_appetite(activities),
        potty=infer_potty_status(activities),
        highlights=generate_highlights(activities, skill_assessments, dog),
        areas_to_improve=generate_areas_to_improve(activities, skill_assessments),
        tomorrow_focus=generate_tomorrow_focus(skill_assessments, dog),
        training_summary=summary,
        skills_practiced=collect_skills_practiced(activities, skill_assessments),
        total_training_minutes=total_minutes(activities, ActivityType.TRAINING),
    )
    logger.debug(
        "Generated report for %s: %d activities, %d assessments, mood=%s",
        dog.name, len(activities), len(skill_assessments), mood.value,
    )
    return report


def generate_quick_report(dog_name: str, activities: Sequence[Activity]) -> QuickReport:
    """Classifier-only preview, used before a full assessment set exists."""
    report = QuickReport(
        mood=infer_mood(activities),
        energy_level=infer_energy_level(activities),
        appetite=infer_appetite(activities),
        potty=infer_potty_status(activities),
        total_training_minutes=total_minutes(activities, ActivityType.TRAINING),
    )
    logger.debug("Generated quick report for %s: %d activities", dog_name, len(activities))
    return report


# --- Boundary ---

def _list_field(payload: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    items = payload.get(key) or []
    if not isinstance(items, list):
        raise InvalidInputError(f"'{key}' must be a list", field=key)
    for item in items:
        if not isinstance(item, dict):
            raise InvalidInputError(f"Every entry of '{key}' must be an object", field=key)
    return items


def parse_activities(raw: List[Dict[str, Any]]) -> List[Activity]:
    return [Activity.from_dict(item) for item in raw]


def parse_assessments(raw: List[Dict[str, Any]]) -> List[SkillAssessment]:
    return [SkillAssessment.from_dict(item) for item in raw]


def build_report_from_payload(payload: Dict[str, Any]) -> GeneratedReport:
    """
    Validate a raw {activities, skill_assessments, dog} payload and generate the report.

    Raises:
        InvalidInputError: payload breaks the input contract
    """
    dog = payload.get("dog")
    if not isinstance(dog, dict):
        raise InvalidInputError("'dog' must be an object", field="dog")

    activities = parse_activities(_list_field(payload, "activities"))
    assessments = parse_assessments(_list_field(payload, "skill_assessments"))
    return generate_report(activities, assessments, DogContext.from_dict(dog))


def build_quick_report_from_payload(payload: Dict[str, Any]) -> QuickReport:
    dog_name = payload.get("dog_name")
    if not dog_name and isinstance(payload.get("dog"), dict):
        dog_name = payload["dog"].get("name")
    if not isinstance(dog_name, str) or not dog_name.strip():
        raise InvalidInputError("'dog_name' is required", field="dog_name")

    activities = parse_activities(_list_field(payload, "activities"))
    return generate_quick_report(dog_name, activities)
