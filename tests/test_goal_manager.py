"""Test the goal manager: scoring, levels and save/load."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from eternal_quest.core.manager import GoalManager, EventResult, level_for_score
from eternal_quest.errors import (
    NotFoundError, OutOfRangeError, ParseError, SaveError, ValidationError,
)
from eternal_quest.goals.model import SimpleGoal, EternalGoal, ChecklistGoal


@pytest.fixture
def manager():
    """Manager with one goal of each variant."""
    m = GoalManager()
    m.create_goal("SimpleGoal", "Marathon", "run a marathon", 1000)
    m.create_goal("EternalGoal", "Pray", "daily prayer", 5)
    m.create_goal("ChecklistGoal", "Temple", "attend the temple", 10, target=3, bonus=50)
    return m


def _snapshot(m):
    return (m.current_score(), m.current_level(), [g.serialize() for g in m.goals])


def test_new_manager_is_empty():
    m = GoalManager()
    assert m.current_score() == 0
    assert m.current_level() == 1
    assert m.list_goals() == []


def test_checklist_scenario():
    m = GoalManager()
    m.create_goal("ChecklistGoal", "Temple", "attend the temple", 10, target=3, bonus=50)

    results = [m.record_event(0) for _ in range(3)]
    assert [r.points for r in results] == [10, 10, 60]
    assert m.current_score() == 80
    assert m.current_level() == 1

    fourth = m.record_event(0)
    assert isinstance(fourth, EventResult)
    assert fourth.points == 0
    assert fourth.outcome.already_complete is True
    assert m.current_score() == 80


def test_list_goals_in_insertion_order(manager):
    assert manager.list_goals() == [
        "[ ] Marathon (run a marathon)",
        "[ ] Pray (daily prayer)",
        "[ ] Temple (attend the temple) -- Currently completed: 0/3",
    ]
    assert manager.goal_names() == ["Marathon", "Pray", "Temple"]


def test_duplicate_names_allowed():
    m = GoalManager()
    m.add_goal(EternalGoal("Pray", "morning", 5))
    m.add_goal(EternalGoal("Pray", "evening", 5))
    assert m.goal_names() == ["Pray", "Pray"]


def test_create_goal_rejects_bad_arguments():
    m = GoalManager()
    with pytest.raises(ValidationError):
        m.create_goal("ChecklistGoal", "Temple", "attend", 10, target=0, bonus=5)
    with pytest.raises(ValidationError):
        m.create_goal("MysteryGoal", "x", "y", 1)
    assert m.goals == []


@pytest.mark.parametrize("index", [-1, 3, 99, "0", None, True])
def test_record_event_out_of_range(manager, index):
    manager.record_event(1)
    before = _snapshot(manager)
    with pytest.raises(OutOfRangeError):
        manager.record_event(index)
    assert _snapshot(manager) == before


def test_out_of_range_on_empty_manager():
    with pytest.raises(OutOfRangeError):
        GoalManager().record_event(0)


def test_level_is_derived_after_every_event():
    m = GoalManager()
    m.add_goal(EternalGoal("Grind", "every day", 300))
    level_ups = []
    for i in range(12):
        result = m.record_event(0)
        assert result.score == m.current_score()
        assert result.level == m.current_score() // 1000 + 1 == m.current_level()
        if result.leveled_up:
            level_ups.append(i + 1)
    # 1200 after the 4th event, 2100 after the 7th, 3000 after the 10th
    assert level_ups == [4, 7, 10]


@pytest.mark.parametrize("score,level", [
    (0, 1), (999, 1), (1000, 2), (1999, 2), (2000, 3), (12345, 13),
])
def test_level_for_score(score, level):
    assert level_for_score(score) == level


def test_level_ignores_environment(monkeypatch):
    monkeypatch.setenv("EQ_POINTS_PER_LEVEL", "100")
    m = GoalManager()
    m.add_goal(EternalGoal("Grind", "every day", 300))
    result = m.record_event(0)
    assert result.leveled_up is False
    assert m.current_level() == m.current_score() // 1000 + 1 == 1


def test_event_result_fields(manager):
    result = manager.record_event(0)
    assert result.points == 1000
    assert result.score == 1000
    assert result.level == 2
    assert result.leveled_up is True
    assert result.outcome.completed_now is True


class TestSaveLoad:
    """Persistence through the manager."""

    def test_empty_round_trip(self, tmp_path):
        path = tmp_path / "goals.txt"
        GoalManager().save(path)

        loaded = GoalManager()
        loaded.load(path)
        assert loaded.current_score() == 0
        assert loaded.current_level() == 1
        assert loaded.goals == []

    def test_file_layout(self, manager, tmp_path):
        manager.record_event(2)
        path = tmp_path / "goals.txt"
        assert manager.save(path) == str(path)
        assert path.read_text(encoding="utf-8").splitlines() == [
            "10",
            "1",
            "SimpleGoal:Marathon,run a marathon,1000,False",
            "EternalGoal:Pray,daily prayer,5",
            "ChecklistGoal:Temple,attend the temple,10,50,3,1",
        ]

    def test_round_trip_keeps_state_and_behaviour(self, manager, tmp_path):
        for index in (0, 1, 2, 2):
            manager.record_event(index)
        path = tmp_path / "goals.txt"
        manager.save(path)

        loaded = GoalManager()
        loaded.load(path)
        assert _snapshot(loaded) == _snapshot(manager)
        assert loaded.goals == manager.goals
        for index in (0, 1, 2, 2):
            assert loaded.record_event(index).points == manager.record_event(index).points

    def test_load_replaces_existing_goals(self, manager, tmp_path):
        path = tmp_path / "goals.txt"
        path.write_text("5\n1\nEternalGoal:Walk,walk the dog,5\n", encoding="utf-8")
        manager.load(path)
        assert manager.goal_names() == ["Walk"]
        assert manager.current_score() == 5

    def test_unknown_variant_leaves_state_untouched(self, manager, tmp_path):
        manager.record_event(1)
        before = _snapshot(manager)
        goals_before = list(manager.goals)

        path = tmp_path / "goals.txt"
        path.write_text(
            "500\n1\nEternalGoal:Walk,walk the dog,5\nWeeklyGoal:Clean,clean house,20\n",
            encoding="utf-8",
        )
        with pytest.raises(ParseError):
            manager.load(path)
        assert _snapshot(manager) == before
        assert manager.goals == goals_before

    def test_missing_file(self, manager, tmp_path):
        before = _snapshot(manager)
        with pytest.raises(NotFoundError):
            manager.load(tmp_path / "nope.txt")
        assert _snapshot(manager) == before

    def test_stored_level_is_recomputed(self, tmp_path):
        path = tmp_path / "goals.txt"
        path.write_text("2500\n9\n", encoding="utf-8")
        m = GoalManager()
        m.load(path)
        assert m.current_score() == 2500
        assert m.current_level() == 3

    def test_checklist_load_does_not_replay_bonus(self, tmp_path):
        path = tmp_path / "goals.txt"
        path.write_text("60\n1\nChecklistGoal:Temple,attend,10,50,3,3\n", encoding="utf-8")
        m = GoalManager()
        m.load(path)
        assert m.current_score() == 60
        assert m.record_event(0).points == 0

    def test_save_to_missing_directory(self, manager, tmp_path):
        before = _snapshot(manager)
        with pytest.raises(SaveError):
            manager.save(tmp_path / "missing" / "goals.txt")
        assert _snapshot(manager) == before

    def test_default_path_from_env(self, manager, tmp_path, monkeypatch):
        monkeypatch.setenv("EQ_SAVE_FILE", str(tmp_path / "default.txt"))
        manager.save()
        assert (tmp_path / "default.txt").exists()

        other = GoalManager()
        other.load()
        assert other.goal_names() == manager.goal_names()


@pytest.mark.parametrize("separator", ["\u2028", "\x0c", "\x85", "\x1e"])
def test_save_load_with_unusual_line_breaks(tmp_path, separator):
    m = GoalManager()
    m.create_goal("EternalGoal", "Pray", f"morning{separator}prayer", 5)
    m.create_goal("SimpleGoal", f"Run{separator}far", "marathon", 100)
    m.record_event(0)
    path = tmp_path / "goals.txt"
    m.save(path)

    loaded = GoalManager()
    loaded.load(path)
    assert loaded.goals == m.goals
    assert loaded.current_score() == 5
