"""
Report field generators for Kennel Report.

Builds highlights, improvement areas, tomorrow's focus and the narrative
summary from activities, skill assessments and classifier output.
Raw activity notes that trigger a highlight or an improvement area are
passed through verbatim: no deduplication, no length cap.
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Optional, Sequence

from core.classifiers import infer_mood, normalize_note, of_type, total_minutes
from core.config_manager import config
from core.models import MAX_SKILL_LEVEL, Activity, ActivityType, DogContext, Mood, SkillAssessment
from core.rule_evaluator import contains_any

HIGHLIGHT_NOTE_KEYWORDS = ("great", "excellent", "breakthrough", "first time")
CHALLENGE_NOTE_KEYWORDS = ("struggled", "needs work", "distracted", "reactive")

DEFAULT_AREA = "Continue reinforcing learned behaviors in new environments"

MOOD_CLOSINGS: Dict[Mood, str] = {
    Mood.EXCELLENT: "{name} was exceptionally engaged and responsive throughout the day.",
    Mood.GOOD: "{name} showed good focus and made solid progress.",
    Mood.FAIR: "{name} had some challenges today but we worked through them.",
    Mood.POOR: "{name} had a tough day - we'll adjust our approach tomorrow.",
}


def _notes_matching(activities: Sequence[Activity], keywords: Sequence[str]) -> List[str]:
    return [
        a.notes for a in activities
        if a.notes and contains_any(normalize_note(a.notes), keywords)
    ]


def collect_skills_practiced(
    activities: Sequence[Activity],
    skill_assessments: Sequence[SkillAssessment],
) -> List[str]:
    """
    Union of skills worked in training sessions and assessed skills.

    Insertion-ordered: training skills first, then assessments; first occurrence wins.
    """
    skills: Dict[str, None] = {}
    for activity in of_type(activities, ActivityType.TRAINING):
        for skill in activity.skills_worked:
            skills.setdefault(skill, None)
    for assessment in skill_assessments:
        skills.setdefault(assessment.skill_name, None)
    return list(skills)


def generate_highlights(
    activities: Sequence[Activity],
    skill_assessments: Sequence[SkillAssessment],
    dog: DogContext,
) -> List[str]:
    highlights: List[str] = []

    improved = [s for s in skill_assessments if s.improved]
    if improved:
        shown = config.IMPROVED_SKILLS_SHOWN
        text = f"Showed improvement in {', '.join(s.skill_name for s in improved[:shown])}"
        if len(improved) > shown:
            text += f" and {len(improved) - shown} more skills"
        highlights.append(text)

    # Every skill currently mastered, whether mastered today or earlier
    mastered = [s for s in skill_assessments if s.level == MAX_SKILL_LEVEL]
    if mastered:
        highlights.append(f"Mastered {', '.join(s.skill_name for s in mastered)}!")

    highlights.extend(_notes_matching(activities, HIGHLIGHT_NOTE_KEYWORDS))

    training_minutes = total_minutes(activities, ActivityType.TRAINING)
    if training_minutes >= config.LONG_TRAINING_HIGHLIGHT_MINUTES:
        highlights.append(f"Completed {training_minutes} minutes of focused training today")

    if not highlights:
        highlights.append(f"{dog.name} had a productive day with good focus during training")

    return highlights[:config.MAX_HIGHLIGHTS]


def generate_areas_to_improve(
    activities: Sequence[Activity],
    skill_assessments: Sequence[SkillAssessment],
) -> List[str]:
    areas: List[str] = []

    developing = [s for s in skill_assessments if 1 <= s.level <= 3]
    if developing:
        names = [s.skill_name for s in developing[:config.DEVELOPING_SKILLS_SHOWN]]
        areas.append(f"Continue working on {' and '.join(names)}")

    areas.extend(_notes_matching(activities, CHALLENGE_NOTE_KEYWORDS))

    if not areas:
        areas.append(DEFAULT_AREA)

    return areas[:config.MAX_AREAS_TO_IMPROVE]


def program_progress_percent(dog: DogContext) -> int:
    """Program completion in whole percent, rounded half up."""
    ratio = Decimal(dog.program_day) / Decimal(dog.total_program_days) * 100
    return int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def generate_tomorrow_focus(
    skill_assessments: Sequence[SkillAssessment],
    dog: DogContext,
) -> str:
    near_mastery = [s for s in skill_assessments if 3 <= s.level < MAX_SKILL_LEVEL]
    if near_mastery:
        return (
            f"Focus on advancing {near_mastery[0].skill_name} - "
            f"{dog.name} is close to mastering this skill"
        )

    # sorted() is stable, so ties keep their original order
    needs_work = sorted(
        (s for s in skill_assessments if 1 <= s.level <= 2),
        key=lambda s: s.level,
    )
    if needs_work:
        return f"Continue building foundation for {needs_work[0].skill_name}"

    progress = program_progress_percent(dog)
    if progress >= config.FINAL_POLISH_PROGRESS:
        return "Final polish on all commands - preparing for graduation"
    if progress >= config.DISTRACTION_PROGRESS:
        return "Increase distractions during training to proof behaviors"
    return "Continue building on today's progress with consistent practice"


def generate_training_summary(
    activities: Sequence[Activity],
    skill_assessments: Sequence[SkillAssessment],
    dog: DogContext,
    mood: Optional[Mood] = None,
) -> str:
    """
    Narrative paragraph for the day.

    Args:
        mood: precomputed mood; recomputed from activities when omitted
    """
    training = of_type(activities, ActivityType.TRAINING)
    session_count = len(training)
    minutes = sum(a.duration for a in training)

    summary = (
        f"{dog.name} had {session_count} training session{'' if session_count == 1 else 's'} today, "
        f"totaling {minutes} minutes of focused work. "
    )

    skills = collect_skills_practiced(activities, skill_assessments)
    if skills:
        shown = config.SUMMARY_SKILLS_SHOWN
        summary += f"We worked on {', '.join(skills[:shown])}"
        if len(skills) > shown:
            summary += f" and {len(skills) - shown} other skills"
        summary += ". "

    if mood is None:
        mood = infer_mood(activities)
    summary += MOOD_CLOSINGS[mood].format(name=dog.name)

    return summary
