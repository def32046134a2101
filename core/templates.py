"""
Canned report templates for common scenarios.

The registry is read-only; apply_template hands out fresh list copies so
callers can edit a report without touching the registry.
"""
from types import MappingProxyType
from typing import List, Mapping

from core.exceptions import UnknownTemplateError
from core.models import TemplateReport

DOG_NAME_PLACEHOLDER = "{dogName}"

REPORT_TEMPLATES: Mapping[str, Mapping[str, object]] = MappingProxyType({
    "excellent_day": MappingProxyType({
        "summary": "{dogName} had an outstanding day! Showed exceptional focus and made great progress across all areas.",
        "highlights": (
            "Excellent focus during training sessions",
            "Responded well to all commands",
            "Great attitude and engagement",
        ),
        "areas_to_improve": ("Continue building on today's momentum",),
        "tomorrow_focus": "Increase difficulty and add new distractions",
    }),
    "good_day": MappingProxyType({
        "summary": "{dogName} had a solid training day with good progress on key skills.",
        "highlights": (
            "Good focus during training",
            "Steady improvement on commands",
        ),
        "areas_to_improve": ("Work on consistency in distracting environments",),
        "tomorrow_focus": "Continue building muscle memory on core commands",
    }),
    "challenging_day": MappingProxyType({
        "summary": "{dogName} had some challenges today, but we made adjustments and ended on a positive note.",
        "highlights": ("Showed resilience when faced with challenges",),
        "areas_to_improve": (
            "Building confidence in challenging situations",
            "Working on focus with distractions",
        ),
        "tomorrow_focus": "Return to basics and rebuild confidence",
    }),
    "first_day": MappingProxyType({
        "summary": "Welcome {dogName}! Today was all about settling in and getting to know each other.",
        "highlights": (
            "Successfully acclimated to the facility",
            "Started baseline assessments",
            "Building trust and rapport",
        ),
        "areas_to_improve": ("Getting comfortable with new environment",),
        "tomorrow_focus": "Begin foundation training once fully settled",
    }),
    "graduation_ready": MappingProxyType({
        "summary": "{dogName} is graduation ready! All program goals have been achieved.",
        "highlights": (
            "Mastered all required commands",
            "Excellent behavior in all environments",
            "Ready for real-world application",
        ),
        "areas_to_improve": ("Continue practice at home to maintain skills",),
        "tomorrow_focus": "Final review and graduation preparation",
    }),
})


def list_templates() -> List[str]:
    return list(REPORT_TEMPLATES)


def apply_template(template_key: str, dog_name: str) -> TemplateReport:
    """
    Fill a canned template with the dog's name.

    Raises:
        UnknownTemplateError: template_key is not in REPORT_TEMPLATES
    """
    template = REPORT_TEMPLATES.get(template_key)
    if template is None:
        raise UnknownTemplateError(template_key, available=list_templates())

    return TemplateReport(
        summary=template["summary"].replace(DOG_NAME_PLACEHOLDER, dog_name),
        highlights=list(template["highlights"]),
        areas_to_improve=list(template["areas_to_improve"]),
        tomorrow_focus=template["tomorrow_focus"],
    )
