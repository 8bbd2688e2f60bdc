"""
test_caller_filter.py
---------------------
Unit tests for CallerAttributionFilter and ExclusionRules.

Responsibilities
----------------
- Verify exact-match exclusion by method, type and (type, method) pair.
- Verify ordering and the two-caller limit.
- Verify frame resolution from live and synthetic frames.
"""

import sys
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from ijs_logger.logger.caller_filter import (
    UNKNOWN,
    CallerAttributionFilter,
    ExclusionRules,
    StackFrame,
)


# ===========================================================
# Helpers
# ===========================================================

class Player:
    def update(self, caller_filter):
        return caller_filter.nearest_callers()


class Game:
    def run(self, caller_filter):
        return Player().update(caller_filter)


def fake_frame(name, qualname=None, f_locals=None, module="game.scenes.level", back=None):
    code = SimpleNamespace(co_name=name)
    if qualname is not None:
        code.co_qualname = qualname
    return SimpleNamespace(f_code=code, f_locals=f_locals or {},
                           f_globals={"__name__": module}, f_back=back)


# ===========================================================
# Exclusion Rules
# ===========================================================

def test_default_rules_exclude_known_plumbing():
    rules = ExclusionRules.default()

    assert rules(StackFrame("Task", "anything"))
    assert rules(StackFrame("PrefixedLogger", "print_log"))
    assert rules(StackFrame("BaseEventLoop", "_run_once"))
    assert rules(StackFrame("Whatever", "<genexpr>"))
    assert rules(StackFrame("Handle", "_run"))


def test_exclusion_is_exact_match_only():
    rules = ExclusionRules.default()

    assert not rules(StackFrame("MyTaskRunner", "tick"))
    assert not rules(StackFrame("task", "tick"))
    assert not rules(StackFrame("Player", "_run_once_more"))


def test_pair_exclusion_needs_both_parts():
    rules = ExclusionRules.default()

    assert rules(StackFrame("Thread", "run"))
    assert not rules(StackFrame("Player", "run"))
    assert not rules(StackFrame("Thread", "start_game"))


def test_extended_rules_keep_defaults():
    rules = ExclusionRules.default().extended(type_names=["EventManager"],
                                              pairs=[["SceneManager", "update"]])

    assert rules(StackFrame("EventManager", "dispatch"))
    assert rules(StackFrame("SceneManager", "update"))
    assert not rules(StackFrame("SceneManager", "draw"))
    assert rules(StackFrame("Task", "x"))


def test_rules_from_config_can_replace_defaults():
    rules = ExclusionRules.from_config({"replace_defaults": True, "methods": ["tick"]})

    assert rules(StackFrame("Player", "tick"))
    assert not rules(StackFrame("Task", "x"))


def test_rules_from_empty_config_are_defaults():
    assert ExclusionRules.from_config(None) == ExclusionRules.default()


def test_rules_from_config_accept_a_single_bare_name():
    with patch("ijs_logger.logger.caller_filter.DebugLogger") as mock_logger:
        rules = ExclusionRules.from_config({"types": "EventManager", "methods": "tick"})

    assert rules(StackFrame("EventManager", "dispatch"))
    assert rules(StackFrame("Player", "tick"))
    assert not rules(StackFrame("E", "x"))
    assert mock_logger.warn.call_count == 2
    assert mock_logger.warn.call_args.kwargs["category"] == "loading"


# ===========================================================
# Filtering
# ===========================================================

def test_nearest_callers_skips_excluded_and_keeps_order(make_frames):
    caller_filter = CallerAttributionFilter()
    stack = make_frames(
        ("PrefixedLogger", "log"),
        ("PrefixedLogger", "print_log"),
        ("Player", "take_damage"),
        ("Handle", "_run"),
        ("Enemy", "attack"),
        ("Game", "run"),
    )

    callers = caller_filter.nearest_callers(stack)

    assert callers == [StackFrame("Player", "take_damage"), StackFrame("Enemy", "attack")]


@pytest.mark.parametrize("pairs, expected", [
    ((), 0),
    ((("Task", "step"),), 0),
    ((("Player", "update"),), 1),
    ((("Player", "update"), ("Task", "step"), ("Game", "run")), 2),
])
def test_nearest_callers_returns_what_survives(make_frames, pairs, expected):
    assert len(CallerAttributionFilter().nearest_callers(make_frames(*pairs))) == expected


def test_filter_is_lazy():
    consumed = []

    def stack():
        for frame in [StackFrame("Player", "a"), StackFrame("Player", "b"), StackFrame("Player", "c")]:
            consumed.append(frame)
            yield frame

    CallerAttributionFilter().nearest_callers(stack(), count=2)

    assert len(consumed) == 2


def test_custom_predicate_replaces_rules(make_frames):
    caller_filter = CallerAttributionFilter(exclude=lambda f: f.type_name.startswith("Ui"))

    callers = caller_filter.nearest_callers(make_frames(("UiButton", "click"), ("Task", "step")))

    assert callers == [StackFrame("Task", "step")]


# ===========================================================
# Live Stack
# ===========================================================

def test_live_stack_starts_at_the_caller():
    caller_filter = CallerAttributionFilter(exclude=lambda f: False)

    callers = Game().run(caller_filter)

    assert callers == [StackFrame("Player", "update"), StackFrame("Game", "run")]


@pytest.mark.skipif(sys.version_info < (3, 11), reason="needs co_qualname")
def test_live_stack_skips_nested_function_scopes():
    caller_filter = CallerAttributionFilter()

    def inner():
        return caller_filter.nearest_callers(count=1)

    callers = inner()

    assert callers[0].method_name == "test_live_stack_skips_nested_function_scopes"


# ===========================================================
# Frame Resolution
# ===========================================================

def test_frame_resolves_owner_from_qualname():
    frame = fake_frame("update", qualname="Player.update")

    assert StackFrame.from_frame(frame) == StackFrame("Player", "update")


def test_frame_resolves_owner_from_self_without_qualname():
    frame = fake_frame("update", f_locals={"self": Player()})

    assert StackFrame.from_frame(frame) == StackFrame("Player", "update")


def test_frame_resolves_owner_from_cls_without_qualname():
    frame = fake_frame("create", f_locals={"cls": Game})

    assert StackFrame.from_frame(frame) == StackFrame("Game", "create")


def test_module_function_uses_module_name():
    frame = fake_frame("spawn_wave", qualname="spawn_wave", module="game.waves")

    assert StackFrame.from_frame(frame) == StackFrame("waves", "spawn_wave")


def test_unresolvable_frame_uses_unknown_sentinel():
    frame = SimpleNamespace(f_code=None, f_locals=None, f_globals=None, f_back=None)

    resolved = StackFrame.from_frame(frame)

    assert resolved == StackFrame(UNKNOWN, UNKNOWN)
    assert not resolved.is_resolved


def test_walk_follows_back_links():
    outer = fake_frame("run", qualname="Game.run")
    inner = fake_frame("update", qualname="Player.update", back=outer)

    assert list(CallerAttributionFilter.walk(inner)) == [
        StackFrame("Player", "update"),
        StackFrame("Game", "run"),
    ]
