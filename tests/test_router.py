"""Tests for tab navigation and fade transitions."""

import pytest

from dailyhub.core.router import Router, Tab, Transition


@pytest.fixture
def router():
    return Router()


@pytest.fixture
def played(router):
    transitions = []
    router.add_listener(transitions.append)
    return transitions


class TestTab:
    def test_titles(self):
        assert [t.title for t in Tab] == ["Notes", "Tasks", "Calendar"]

    @pytest.mark.parametrize("name", ["tasks", "TASKS", " Tasks "])
    def test_parse(self, name):
        assert Tab.parse(name) is Tab.TASKS

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown tab"):
            Tab.parse("settings")


class TestSelectTab:
    def test_initial_tab_is_notes(self, router):
        assert router.current_tab() is Tab.NOTES

    def test_configured_initial_tab(self):
        assert Router(initial_tab=Tab.CALENDAR).current_tab() is Tab.CALENDAR

    def test_switch_plays_fade(self, router, played):
        transition = router.select_tab(Tab.TASKS)
        assert router.current_tab() is Tab.TASKS
        assert transition == Transition(from_tab=Tab.NOTES, to_tab=Tab.TASKS)
        assert transition.kind == "fade"
        assert transition.duration_ms == 400
        assert played == [transition]

    def test_reselect_is_noop(self, router, played):
        router.select_tab(Tab.TASKS)
        assert router.select_tab(Tab.TASKS) is None
        assert router.current_tab() is Tab.TASKS
        assert len(played) == 1

    def test_reselect_initial_tab_is_noop(self, router, played):
        assert router.select_tab(Tab.NOTES) is None
        assert played == []

    def test_fade_duration_passed_through(self):
        router = Router(fade_duration_ms=250)
        assert router.select_tab(Tab.CALENDAR).duration_ms == 250

    def test_every_listener_notified(self, router):
        first, second = [], []
        router.add_listener(first.append)
        router.add_listener(second.append)
        router.select_tab(Tab.CALENDAR)
        assert len(first) == len(second) == 1


class TestBack:
    def test_back_returns_to_start(self, router, played):
        router.select_tab(Tab.CALENDAR)
        transition = router.back()
        assert router.current_tab() is Tab.NOTES
        assert transition.from_tab is Tab.CALENDAR
        assert transition.to_tab is Tab.NOTES
        assert len(played) == 2

    def test_back_on_start_tab(self, router):
        assert router.back() is None
        assert router.current_tab() is Tab.NOTES

    def test_back_skips_intermediate_tabs(self, router):
        router.select_tab(Tab.TASKS)
        router.select_tab(Tab.CALENDAR)
        router.back()
        assert router.current_tab() is Tab.NOTES
        assert router.back() is None


class TestTransition:
    def test_enter_opacity_ramp(self):
        t = Transition(Tab.NOTES, Tab.TASKS)
        assert t.enter_opacity(0) == 0.0
        assert t.enter_opacity(200) == pytest.approx(0.5)
        assert t.enter_opacity(400) == 1.0
        assert t.enter_opacity(1000) == 1.0

    def test_exit_opacity_is_reverse(self):
        t = Transition(Tab.NOTES, Tab.TASKS)
        assert t.exit_opacity(0) == 1.0
        assert t.exit_opacity(100) == pytest.approx(0.75)
        assert t.exit_opacity(400) == 0.0

    def test_negative_elapsed_clamped(self):
        t = Transition(Tab.NOTES, Tab.TASKS)
        assert t.enter_opacity(-50) == 0.0

    def test_zero_duration_is_cut(self):
        t = Transition(Tab.NOTES, Tab.TASKS, duration_ms=0)
        assert t.enter_opacity(0) == 1.0
        assert list(t.frames()) == [1.0]

    def test_frames(self):
        t = Transition(Tab.NOTES, Tab.TASKS)
        assert list(t.frames(4)) == pytest.approx([0.25, 0.5, 0.75, 1.0])
