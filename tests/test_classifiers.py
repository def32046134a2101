import pytest

from core.classifiers import (
    MOOD_RULES,
    infer_appetite,
    infer_energy_level,
    infer_mood,
    infer_potty_status,
    score_mood_keywords,
)
from core.config_manager import config
from core.models import Appetite, EnergyLevel, Mood, PottyStatus

MOOD_RANK = {Mood.POOR: 0, Mood.FAIR: 1, Mood.GOOD: 2, Mood.EXCELLENT: 3}


def test_empty_day_routes_every_classifier_to_its_default():
    assert infer_mood([]) == Mood.GOOD
    assert infer_energy_level([]) == EnergyLevel.NORMAL
    assert infer_appetite([]) == Appetite.GOOD
    assert infer_potty_status([]) == PottyStatus.NORMAL


def test_day_without_notes_or_training_uses_defaults(make_activity):
    activities = [
        make_activity("kennel", 120),
        make_activity("feeding", 10),
        make_activity("potty", 5),
        make_activity("rest", 60),
    ]

    assert infer_mood(activities) == Mood.GOOD
    assert infer_energy_level(activities) == EnergyLevel.NORMAL
    assert infer_appetite(activities) == Appetite.GOOD
    assert infer_potty_status(activities) == PottyStatus.NORMAL


def test_score_counts_each_keyword_once_per_note(make_activity):
    activities = [
        make_activity("training", 20, notes="Great focus, great recall, very ENGAGED"),
        make_activity("play", 10, notes="a bit tired"),
        make_activity("rest", 30),
    ]

    assert score_mood_keywords(activities) == (2, 1)


def test_mood_excellent_needs_strong_positive_notes_and_training(make_activity):
    activities = [make_activity("training", 30, notes="great session, focused and engaged")]

    assert infer_mood(activities) == Mood.EXCELLENT


def test_mood_not_excellent_when_training_is_short(make_activity):
    activities = [make_activity("training", 29, notes="great session, focused and engaged")]

    assert infer_mood(activities) == Mood.GOOD


def test_training_minutes_add_up_across_sessions(make_activity):
    activities = [
        make_activity("training", 15, notes="happy and excited"),
        make_activity("training", 15, notes="responsive"),
    ]

    assert infer_mood(activities) == Mood.EXCELLENT


def test_mood_good_with_balanced_notes_training_and_play(make_activity):
    activities = [
        make_activity("training", 45, notes="focused but a little distracted"),
        make_activity("play", 20),
    ]

    assert MOOD_RULES.match({
        "positive": 1, "negative": 1, "has_good_training": True, "has_play": True,
    }).name == "balanced_with_training_and_play"
    assert infer_mood(activities) == Mood.GOOD


def test_mood_fair_when_negative_notes_dominate(make_activity):
    activities = [make_activity("training", 20, notes="distracted and tired")]

    assert infer_mood(activities) == Mood.FAIR


def test_mood_poor_is_reachable_for_very_negative_days(make_activity):
    activities = [make_activity("training", 20, notes="stressed, anxious, distracted, reluctant")]

    assert infer_mood(activities) == Mood.POOR


def test_mood_is_monotonic_in_positive_keywords(make_activity):
    base = [
        make_activity("training", 30),
        make_activity("kennel", 60, notes="stressed, anxious, reluctant, frustrated, tired"),
    ]

    previous = None
    for extra in range(0, 12):
        activities = base + [make_activity("rest", 0, notes="great") for _ in range(extra)]
        mood = infer_mood(activities)
        if previous is not None:
            assert MOOD_RANK[mood] >= MOOD_RANK[previous]
        previous = mood

    assert previous == Mood.EXCELLENT


@pytest.mark.parametrize(
    "activities, expected",
    [
        ([("play", 91, None)], EnergyLevel.HIGH),
        ([("play", 90, None)], EnergyLevel.NORMAL),
        ([("play", 45, None), ("play", 46, None)], EnergyLevel.HIGH),
        ([("rest", 181, None)], EnergyLevel.LOW),
        ([("rest", 180, None)], EnergyLevel.NORMAL),
        ([("training", 10, "Very Active pup this morning")], EnergyLevel.HIGH),
        ([("kennel", 10, "low energy after vet visit")], EnergyLevel.LOW),
        ([("kennel", 10, "seemed tired")], EnergyLevel.LOW),
    ],
)
def test_energy_level(make_activity, activities, expected):
    built = [make_activity(t, d, notes=n) for t, d, n in activities]

    assert infer_energy_level(built) == expected


def test_energy_high_wins_over_low(make_activity):
    activities = [
        make_activity("play", 120),
        make_activity("rest", 200, notes="tired after play"),
    ]

    assert infer_energy_level(activities) == EnergyLevel.HIGH


def test_energy_threshold_follows_config(make_activity, monkeypatch):
    monkeypatch.setattr(config, "HIGH_ENERGY_PLAY_MINUTES", 30)

    assert infer_energy_level([make_activity("play", 31)]) == EnergyLevel.HIGH


def test_appetite_ignores_notes_outside_feeding(make_activity):
    activities = [make_activity("training", 20, notes="refused to sit")]

    assert infer_appetite(activities) == Appetite.GOOD


@pytest.mark.parametrize(
    "notes, expected",
    [
        ("Ate all kibble", Appetite.EXCELLENT),
        ("cleaned bowl in a minute", Appetite.EXCELLENT),
        ("ate most of dinner", Appetite.GOOD),
        ("picky, ate about half", Appetite.FAIR),
        ("Refused breakfast", Appetite.POOR),
        ("barely touched food, seemed to refuse it", Appetite.POOR),
        ("didn’t eat lunch", Appetite.POOR),
        ("no appetite today", Appetite.POOR),
        ("finished but picky about the topper", Appetite.EXCELLENT),
        ("new food brand", Appetite.GOOD),
        (None, Appetite.GOOD),
    ],
)
def test_appetite(make_activity, notes, expected):
    assert infer_appetite([make_activity("feeding", 10, notes=notes)]) == expected


def test_appetite_joins_all_feeding_notes(make_activity):
    activities = [
        make_activity("feeding", 10, notes="ate some"),
        make_activity("feeding", 10, notes="cleaned bowl"),
    ]

    assert infer_appetite(activities) == Appetite.EXCELLENT


@pytest.mark.parametrize(
    "notes, expected",
    [
        ("loose stool", PottyStatus.DIARRHEA),
        ("Diarrhea twice", PottyStatus.DIARRHEA),
        ("soft", PottyStatus.SOFT),
        ("soft then loose", PottyStatus.DIARRHEA),
        ("accident in the hallway", PottyStatus.ACCIDENT),
        ("peed inside the crate", PottyStatus.ACCIDENT),
        ("all good", PottyStatus.NORMAL),
    ],
)
def test_potty_status(make_activity, notes, expected):
    assert infer_potty_status([make_activity("potty", 5, notes=notes)]) == expected


def test_potty_ignores_other_activity_notes(make_activity):
    activities = [
        make_activity("play", 20, notes="played with a soft toy inside"),
        make_activity("potty", 5),
    ]

    assert infer_potty_status(activities) == PottyStatus.NORMAL
