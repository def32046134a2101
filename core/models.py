"""
Core Data Models for Kennel Report.
Defines the value objects the report engine consumes and produces.
"""
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from core.exceptions import InvalidInputError


class ActivityType(str, Enum):
    TRAINING = "training"
    FEEDING = "feeding"
    POTTY = "potty"
    PLAY = "play"
    REST = "rest"
    KENNEL = "kennel"


class Mood(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class EnergyLevel(str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class Appetite(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class PottyStatus(str, Enum):
    NORMAL = "normal"
    SOFT = "soft"
    DIARRHEA = "diarrhea"
    ACCIDENT = "accident"


# Natural-language labels used by the text renderers
ACTIVITY_LABELS: Dict[ActivityType, str] = {
    ActivityType.TRAINING: "training session",
    ActivityType.FEEDING: "meal time",
    ActivityType.POTTY: "potty break",
    ActivityType.PLAY: "play session",
    ActivityType.REST: "rest period",
    ActivityType.KENNEL: "kennel time",
}

MIN_SKILL_LEVEL = 0
MAX_SKILL_LEVEL = 5  # mastered

SKILL_LEVEL_LABELS: Dict[int, str] = {
    0: "Not Started",
    1: "Introduced",
    2: "Learning",
    3: "Developing",
    4: "Proficient",
    5: "Mastered",
}

Timestamp = Union[str, datetime]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_name(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _parse_timestamp(value: Timestamp, field_name: str) -> datetime:
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        raise InvalidInputError(f"Invalid timestamp: {value!r}", field=field_name)


@dataclass(frozen=True)
class Activity:
    """One logged event for a dog on a given day."""
    id: str
    type: ActivityType
    start_time: Timestamp
    duration: int = 0                      # minutes
    end_time: Optional[Timestamp] = None
    notes: Optional[str] = None
    skills_worked: List[str] = field(default_factory=list)

    def __post_init__(self):
        try:
            object.__setattr__(self, "type", ActivityType(self.type))
        except ValueError:
            raise InvalidInputError(f"Unknown activity type: {self.type!r}", field="type")
        _parse_timestamp(self.start_time, "start_time")
        if self.end_time is not None:
            _parse_timestamp(self.end_time, "end_time")
        if not _is_int(self.duration):
            raise InvalidInputError(
                f"Activity duration must be an integer number of minutes, got {self.duration!r}",
                field="duration",
            )
        if self.duration < 0:
            raise InvalidInputError(
                f"Activity duration cannot be negative ({self.duration})", field="duration"
            )
        if self.notes is not None and not isinstance(self.notes, str):
            raise InvalidInputError("Activity notes must be text", field="notes")

        skills = self.skills_worked if self.skills_worked is not None else []
        if not isinstance(skills, (list, tuple)) or not all(_is_name(s) for s in skills):
            raise InvalidInputError(
                f"skills_worked must be a list of skill names, got {skills!r}",
                field="skills_worked",
            )
        object.__setattr__(self, "skills_worked", list(skills))

    @property
    def label(self) -> str:
        return ACTIVITY_LABELS[self.type]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Activity":
        """
        Build an Activity from a raw payload.

        When `duration` is absent and both timestamps are present, the
        duration is the whole minutes between start and end.
        """
        if "type" not in data:
            raise InvalidInputError("Activity is missing its type", field="type")
        if "start_time" not in data:
            raise InvalidInputError("Activity is missing its start_time", field="start_time")

        duration = data.get("duration")
        if duration is None:
            duration = 0
            if data.get("end_time"):
                start = _parse_timestamp(data["start_time"], "start_time")
                end = _parse_timestamp(data["end_time"], "end_time")
                try:
                    duration = int((end - start).total_seconds() // 60)
                except TypeError:
                    raise InvalidInputError(
                        "start_time and end_time must both carry a timezone or both omit it",
                        field="end_time",
                    )

        return cls(
            id=str(data.get("id", "")),
            type=data["type"],
            start_time=data["start_time"],
            end_time=data.get("end_time") or None,
            duration=duration,
            notes=data.get("notes"),
            skills_worked=data.get("skills_worked") or [],
        )


@dataclass(frozen=True)
class SkillAssessment:
    """A skill's recorded proficiency (0-5) as of report time."""
    skill_id: str
    skill_name: str
    level: int
    previous_level: Optional[int] = None

    def __post_init__(self):
        if not _is_name(self.skill_name):
            raise InvalidInputError(
                f"Skill name must be non-empty text, got {self.skill_name!r}", field="skill_name"
            )
        for name in ("level", "previous_level"):
            value = getattr(self, name)
            if value is None and name == "previous_level":
                continue
            if not _is_int(value) or not MIN_SKILL_LEVEL <= value <= MAX_SKILL_LEVEL:
                raise InvalidInputError(
                    f"Skill {name} for '{self.skill_name}' must be an integer in "
                    f"[{MIN_SKILL_LEVEL}, {MAX_SKILL_LEVEL}], got {value!r}",
                    field=name,
                )

    @property
    def improved(self) -> bool:
        return self.previous_level is not None and self.level > self.previous_level

    @property
    def level_label(self) -> str:
        return SKILL_LEVEL_LABELS[self.level]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SkillAssessment":
        for key in ("skill_name", "level"):
            if key not in data:
                raise InvalidInputError(f"Skill assessment is missing {key}", field=key)
        return cls(
            skill_id=str(data.get("skill_id", "")),
            skill_name=data["skill_name"],
            level=data["level"],
            previous_level=data.get("previous_level"),
        )


@dataclass(frozen=True)
class DogContext:
    """Descriptive record for the dog the report is about."""
    name: str
    breed: str = ""
    program_name: str = ""
    program_day: int = 1
    total_program_days: int = 1

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidInputError("Dog name is required", field="name")
        for name in ("program_day", "total_program_days"):
            value = getattr(self, name)
            if not _is_int(value) or value < 1:
                raise InvalidInputError(
                    f"{name} must be a positive integer, got {value!r}", field=name
                )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DogContext":
        # Accept both the snake_case and the camelCase field names used by the portal
        return cls(
            name=data.get("name", ""),
            breed=data.get("breed", ""),
            program_name=data.get("program_name", data.get("programName", "")),
            program_day=data.get("program_day", data.get("programDay", 1)),
            total_program_days=data.get("total_program_days", data.get("totalProgramDays", 1)),
        )


def _enum_values(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in data.items()}


@dataclass
class QuickReport:
    """Classifier-only preview of a daily report."""
    mood: Mood
    energy_level: EnergyLevel
    appetite: Appetite
    potty: PottyStatus
    total_training_minutes: int

    def to_dict(self) -> Dict[str, Any]:
        return _enum_values(asdict(self))


@dataclass
class GeneratedReport:
    """Full synthesized daily report."""
    summary: str
    mood: Mood
    energy_level: EnergyLevel
    appetite: Appetite
    potty: PottyStatus
    highlights: List[str]
    areas_to_improve: List[str]
    tomorrow_focus: str
    training_summary: str
    skills_practiced: List[str]
    total_training_minutes: int

    def to_dict(self) -> Dict[str, Any]:
        return _enum_values(asdict(self))


@dataclass
class TemplateReport:
    """Canned report produced from a scenario template."""
    summary: str
    highlights: List[str]
    areas_to_improve: List[str]
    tomorrow_focus: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
