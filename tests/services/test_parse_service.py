"""Tests for ParseService."""

from __future__ import annotations

import logging

import pytest

from ordinaldate.config.models import BatchConfig
from ordinaldate.services.parse import ParseService


class TestParse:
    def test_success(self) -> None:
        result = ParseService().parse("24th of May 1990")
        assert result.ok is True
        assert result.op == "parse"
        assert result.data == {
            "input": "24th of May 1990",
            "day": 24,
            "month": 5,
            "year": 1990,
            "month_name": "May",
        }

    def test_failure_maps_variant(self) -> None:
        result = ParseService().parse("22rd of January 2018")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_DAY_POSTFIX"
        assert result.error.detail == {"day": 22, "suffix": "rd"}
        assert result.data == {"input": "22rd of January 2018"}

    def test_malformed_string(self) -> None:
        result = ParseService().parse("")
        assert result.error is not None
        assert result.error.code == "MALFORMED_DATE_STRING"
        assert result.error.detail == {"input": ""}

    def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="ordinaldate"):
            ParseService().parse("29th of February 2017")
        assert any("NON_LEAP_YEAR" in r.getMessage() for r in caplog.records)


class TestCheck:
    LINES = [
        "# birthdays\n",
        "24th of May 1990\n",
        "\n",
        "31st of April 2018\n",
        "1st of January -4000\n",
    ]

    def test_reports_each_line(self) -> None:
        result = ParseService().check(self.LINES, source="dates.txt")
        assert result.ok is False
        assert result.op == "check"
        assert result.data["count"] == 3
        assert result.data["valid_count"] == 2
        assert result.data["invalid_count"] == 1
        assert result.meta == {"source": "dates.txt"}
        items = result.data["items"]
        assert [i["line"] for i in items] == [2, 4, 5]
        assert items[0]["ok"] is True
        assert items[0]["month_name"] == "May"
        assert items[1] == {
            "line": 4,
            "input": "31st of April 2018",
            "ok": False,
            "code": "DAY_DOES_NOT_FIT_IN_MONTH",
            "message": "Day 31 does not fit in April",
        }
        assert result.error is not None
        assert result.error.code == "INVALID_DATES"
        assert result.error.detail == {"invalid_lines": [4]}

    def test_all_valid(self) -> None:
        result = ParseService().check(["24th of May 1990", "2nd of June 2000"])
        assert result.ok is True
        assert result.error is None
        assert result.meta is None
        assert result.data["valid_count"] == 2

    def test_empty_input_warns(self) -> None:
        result = ParseService().check(["", "# nothing here"])
        assert result.ok is True
        assert result.data["count"] == 0
        assert result.warnings == ["No dates found in input"]

    def test_fail_fast_argument(self) -> None:
        lines = ["bad", "worse", "24th of May 1990"]
        result = ParseService().check(lines, fail_fast=True)
        assert result.data["count"] == 1
        assert result.data["invalid_count"] == 1

    def test_fail_fast_from_config(self) -> None:
        svc = ParseService(BatchConfig(fail_fast=True))
        result = svc.check(["bad", "worse"])
        assert result.data["count"] == 1

    def test_argument_overrides_config(self) -> None:
        svc = ParseService(BatchConfig(fail_fast=True))
        result = svc.check(["bad", "worse"], fail_fast=False)
        assert result.data["count"] == 2

    def test_blank_lines_checked_when_not_skipped(self) -> None:
        svc = ParseService(BatchConfig(skip_blank=False))
        result = svc.check(["24th of May 1990", "   "])
        assert result.data["invalid_count"] == 1
        assert result.data["items"][1]["code"] == "MALFORMED_DATE_STRING"

    def test_custom_comment_prefix(self) -> None:
        svc = ParseService(BatchConfig(comment_prefix="//"))
        result = svc.check(["// note", "# not a comment"])
        assert result.data["count"] == 1
        assert result.data["items"][0]["line"] == 2

    def test_empty_comment_prefix_disables_comments(self) -> None:
        svc = ParseService(BatchConfig(comment_prefix=""))
        result = svc.check(["# 24th of May 1990"])
        assert result.data["invalid_count"] == 1

    def test_strips_line_endings_only(self) -> None:
        result = ParseService().check(["24th of May 1990\r\n"])
        assert result.data["items"][0]["input"] == "24th of May 1990"
