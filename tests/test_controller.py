"""Tests for the directory controller (session state and commands)."""

import pytest

from conftest import TODAY, StaticSource, make_row
from helper_engine.controller import DirectoryController
from helper_engine.errors import HelperLoadError
from helper_engine.models import SearchCriteria, Skill


@pytest.fixture
def notes():
    return []


@pytest.fixture
def controller(rows, notes):
    return DirectoryController(StaticSource(rows), notify=notes.append, today=TODAY)


class TestLoad:
    def test_load_shows_base_pool(self, controller, notes):
        result = controller.load()
        assert result.error is None
        assert result.total_count == 13
        assert result.total_pages == 3
        assert len(result.records) == 6
        assert result.summary == "13 Helpers Found"
        assert result.page_info == "Page 1 of 3"
        assert result.page_buttons == [1, 2, 3]
        assert not result.has_prev
        assert result.has_next
        assert len(controller.original) == 16
        assert notes[-1].message == "Helpers data loaded successfully!"
        assert notes[-1].level == "success"
        assert notes[-1].duration_s == 3.0

    def test_load_failure_is_reported_not_raised(self, notes):
        source = StaticSource([], error=HelperLoadError("Failed to fetch data: 500 Internal Server Error", 500))
        controller = DirectoryController(source, notify=notes.append)
        result = controller.load()
        assert result.error == "Failed to fetch data: 500 Internal Server Error"
        assert result.summary == "Error loading data"
        assert result.records == []
        assert notes[-1].level == "error"
        assert notes[-1].message == "Failed to load helper data"

    def test_retry_after_failure(self, rows, notes):
        source = StaticSource(rows, error=HelperLoadError("boom"))
        controller = DirectoryController(source, notify=notes.append, today=TODAY)
        assert controller.load().error == "boom"
        source.error = None
        result = controller.load()
        assert result.error is None
        assert result.total_count == 13
        assert source.calls == 2

    def test_malformed_cell_does_not_break_load(self, notes):
        rows = [make_row(), make_row(MDW_Code="B", MDW_DOB="1 Jan 99999999999999999999", Expected_Salary="$" + "9" * 5000)]
        controller = DirectoryController(StaticSource(rows), notify=notes.append, today=TODAY)
        result = controller.load()
        assert result.error is None
        assert result.total_count == 2
        assert [h.age for h in result.records] == [34, None]
        assert result.records[1].salary_value == 0
        assert notes[-1].level == "success"

    def test_commands_before_load_work_on_empty_set(self, controller):
        result = controller.next_page()
        assert result.records == []
        assert result.total_pages == 0
        assert result.summary == "0 Helpers Found"
        assert not result.has_next


class TestApplyFilters:
    def test_filter_and_sort(self, controller, notes):
        controller.load()
        result = controller.apply_filters(SearchCriteria(height="150-152", sort="height-desc"))
        assert [h.height for h in result.records] == ["152", "151", "150"]
        assert result.summary == "3 Helpers Found"
        assert notes[-1].message == "Found 3 helpers"
        assert notes[-1].level == "success"

    def test_singular_summary(self, controller):
        controller.load()
        assert controller.apply_filters(SearchCriteria(height="150-150")).summary == "1 Helper Found"

    def test_no_results(self, controller, notes):
        controller.load()
        result = controller.apply_filters(SearchCriteria(search="nobody"))
        assert result.records == []
        assert result.total_pages == 0
        assert notes[-1].message == "No helpers found with current filters"
        assert notes[-1].level == "info"

    def test_filters_jump_back_to_first_page(self, controller):
        controller.load()
        controller.next_page()
        assert controller.apply_filters(SearchCriteria()).page == 1

    def test_terminal_statuses_never_returned(self, controller):
        controller.load()
        controller.apply_filters(SearchCriteria(search="rita"))
        assert controller.filtered == []

    def test_skills_filter(self, controller):
        controller.load()
        result = controller.apply_filters(SearchCriteria(skills=[Skill.PET_CARE]))
        assert result.total_count == 0


class TestPaging:
    def test_next_and_prev_are_guarded(self, controller):
        controller.load()
        assert controller.prev_page().page == 1
        assert controller.next_page().page == 2
        last = controller.next_page()
        assert last.page == 3
        assert len(last.records) == 1
        assert not last.has_next
        assert controller.next_page().page == 3
        assert controller.prev_page().page == 2

    def test_go_to_page(self, controller):
        controller.load()
        assert controller.go_to_page(3).page == 3
        assert controller.go_to_page(4).page == 3
        assert controller.go_to_page(0).page == 3


class TestReset:
    def test_reset_restores_base_pool(self, controller, notes):
        first = controller.load()
        controller.apply_filters(SearchCriteria(search="helper b", sort="name-desc", skills=[Skill.COOKING]))
        controller.next_page()
        result = controller.reset()
        assert [h.code for h in result.records] == [h.code for h in first.records]
        assert result.total_count == 13
        assert result.page == 1
        assert controller.criteria == SearchCriteria()
        assert notes[-1].message == "Filters have been reset"
        assert notes[-1].level == "info"

    def test_snapshot_is_untouched_by_filtering(self, controller):
        controller.load()
        before = list(controller.original)
        controller.apply_filters(SearchCriteria(sort="name-desc"))
        assert list(controller.original) == before
