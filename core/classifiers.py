"""
Day classifiers for Kennel Report.

Each classifier scans the day's activities and their free-text notes and
returns one categorical label. Keyword matching is case-insensitive substring
matching; every chain ends in a default so empty input is always valid.
"""
from typing import Iterable, List, Optional, Sequence, Tuple

from core.config_manager import config
from core.models import Activity, ActivityType, Appetite, EnergyLevel, Mood, PottyStatus
from core.rule_evaluator import Rule, RuleChain, keyword_rule

POSITIVE_MOOD_KEYWORDS = ("great", "excellent", "happy", "excited", "focused", "engaged", "responsive")
NEGATIVE_MOOD_KEYWORDS = ("stressed", "anxious", "distracted", "reluctant", "tired", "frustrated")

HIGH_ENERGY_KEYWORDS = ("high energy", "very active")
LOW_ENERGY_KEYWORDS = ("low energy", "tired")

APPETITE_EXCELLENT_KEYWORDS = ("ate all", "finished", "cleaned bowl")
APPETITE_GOOD_KEYWORDS = ("ate most", "good appetite")
APPETITE_FAIR_KEYWORDS = ("ate some", "picky", "half")
# "refuse" covers both "refused" and "refuse it"
APPETITE_POOR_KEYWORDS = ("didn't eat", "refuse", "no appetite")

POTTY_DIARRHEA_KEYWORDS = ("diarrhea", "loose")
POTTY_SOFT_KEYWORDS = ("soft",)
POTTY_ACCIDENT_KEYWORDS = ("accident", "inside")


def normalize_note(note: Optional[str]) -> str:
    """Lower-case a note and fold typographic apostrophes."""
    if not note:
        return ""
    return note.lower().replace("’", "'").replace("‘", "'")


def of_type(activities: Iterable[Activity], activity_type: ActivityType) -> List[Activity]:
    return [a for a in activities if a.type == activity_type]


def total_minutes(activities: Iterable[Activity], activity_type: ActivityType) -> int:
    return sum(a.duration for a in activities if a.type == activity_type)


def notes_haystack(activities: Iterable[Activity]) -> str:
    """All notes, normalized and joined by spaces."""
    return " ".join(normalize_note(a.notes) for a in activities)


def count_keywords(note: str, keywords: Sequence[str]) -> int:
    return sum(1 for keyword in keywords if keyword in note)


def score_mood_keywords(activities: Iterable[Activity]) -> Tuple[int, int]:
    """
    Count positive and negative mood keywords across notes.

    Each distinct keyword counts once per note.

    Returns:
        (positive_score, negative_score)
    """
    positive = 0
    negative = 0
    for activity in activities:
        if not activity.notes:
            continue
        note = normalize_note(activity.notes)
        positive += count_keywords(note, POSITIVE_MOOD_KEYWORDS)
        negative += count_keywords(note, NEGATIVE_MOOD_KEYWORDS)
    return positive, negative


# --- Mood ---

MOOD_RULES: RuleChain[Mood] = RuleChain(
    "mood",
    [
        Rule(
            "very_positive_with_training",
            lambda f: f["positive"] > f["negative"] + 2 and f["has_good_training"],
            Mood.EXCELLENT,
        ),
        Rule(
            "balanced_with_training_and_play",
            lambda f: f["positive"] >= f["negative"] and f["has_good_training"] and f["has_play"],
            Mood.GOOD,
        ),
        # "poor" is stricter than "fair" and must be checked first
        Rule("very_negative", lambda f: f["negative"] > f["positive"] + 3, Mood.POOR),
        Rule("negative", lambda f: f["negative"] > f["positive"] + 1, Mood.FAIR),
    ],
    default=Mood.GOOD,
)


def infer_mood(activities: Sequence[Activity]) -> Mood:
    training = of_type(activities, ActivityType.TRAINING)
    positive, negative = score_mood_keywords(activities)
    facts = {
        "positive": positive,
        "negative": negative,
        "has_good_training": bool(training)
        and sum(a.duration for a in training) >= config.GOOD_TRAINING_MINUTES,
        "has_play": bool(of_type(activities, ActivityType.PLAY)),
    }
    return MOOD_RULES.evaluate(facts)


# --- Energy ---

ENERGY_RULES: RuleChain[EnergyLevel] = RuleChain(
    "energy_level",
    [
        keyword_rule("high_energy_notes", HIGH_ENERGY_KEYWORDS, EnergyLevel.HIGH),
        Rule(
            "long_play",
            lambda f: f["play_minutes"] > config.HIGH_ENERGY_PLAY_MINUTES,
            EnergyLevel.HIGH,
        ),
        keyword_rule("low_energy_notes", LOW_ENERGY_KEYWORDS, EnergyLevel.LOW),
        Rule(
            "long_rest",
            lambda f: f["rest_minutes"] > config.LOW_ENERGY_REST_MINUTES,
            EnergyLevel.LOW,
        ),
    ],
    default=EnergyLevel.NORMAL,
)


def infer_energy_level(activities: Sequence[Activity]) -> EnergyLevel:
    facts = {
        "haystack": notes_haystack(activities),
        "play_minutes": total_minutes(activities, ActivityType.PLAY),
        "rest_minutes": total_minutes(activities, ActivityType.REST),
    }
    return ENERGY_RULES.evaluate(facts)


# --- Appetite ---

APPETITE_RULES: RuleChain[Appetite] = RuleChain(
    "appetite",
    [
        Rule("no_feeding_logged", lambda f: not f["has_feeding"], Appetite.GOOD),
        keyword_rule("ate_everything", APPETITE_EXCELLENT_KEYWORDS, Appetite.EXCELLENT),
        keyword_rule("ate_most", APPETITE_GOOD_KEYWORDS, Appetite.GOOD),
        keyword_rule("ate_some", APPETITE_FAIR_KEYWORDS, Appetite.FAIR),
        keyword_rule("did_not_eat", APPETITE_POOR_KEYWORDS, Appetite.POOR),
    ],
    default=Appetite.GOOD,
)


def infer_appetite(activities: Sequence[Activity]) -> Appetite:
    """Classify appetite from feeding notes. No feeding data is not treated as bad."""
    feeding = of_type(activities, ActivityType.FEEDING)
    facts = {"has_feeding": bool(feeding), "haystack": notes_haystack(feeding)}
    return APPETITE_RULES.evaluate(facts)


# --- Potty ---

POTTY_RULES: RuleChain[PottyStatus] = RuleChain(
    "potty",
    [
        keyword_rule("diarrhea", POTTY_DIARRHEA_KEYWORDS, PottyStatus.DIARRHEA),
        keyword_rule("soft_stool", POTTY_SOFT_KEYWORDS, PottyStatus.SOFT),
        keyword_rule("accident", POTTY_ACCIDENT_KEYWORDS, PottyStatus.ACCIDENT),
    ],
    default=PottyStatus.NORMAL,
)


def infer_potty_status(activities: Sequence[Activity]) -> PottyStatus:
    facts = {"haystack": notes_haystack(of_type(activities, ActivityType.POTTY))}
    return POTTY_RULES.evaluate(facts)
