"""
Tests for tga_report.logger summary bookkeeping.
"""
import logging

from tga_report.logger import ReportSummary, get_logger


def test_get_logger_adds_single_handler():
    first = get_logger("tga_report.test")
    second = get_logger("tga_report.test")

    assert first is second
    assert len(first.handlers) == 1
    assert first.level == logging.INFO


class TestReportSummary:

    def test_counter_reused_by_title(self):
        summary = ReportSummary()
        summary.counter("Developer with Most Awards").rows = 1

        assert summary.counter("Developer with Most Awards").rows == 1
        assert len(summary.sections) == 1

    def test_report_lists_sections_in_order(self):
        summary = ReportSummary()
        summary.counter("All Award Events with Optional Hosts and Dates").rows = 5
        summary.counter("Award Events with Known Hosts and Dates").rows = 1
        summary.counter("Query for most awarded game in 2020").failed = True

        lines = summary.report().splitlines()

        assert lines[1] == "Report Summary"
        assert lines[3] == "All Award Events with Optional Hosts and Dates: 5 rows"
        assert lines[4] == "Award Events with Known Hosts and Dates: 1 row"
        assert lines[5] == "Query for most awarded game in 2020: FAILED"
        assert lines[6] == "Total: 6 rows"
        assert summary.total_rows == 6
