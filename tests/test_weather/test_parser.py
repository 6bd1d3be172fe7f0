"""Tests for ceiling/visibility extraction from report lines."""

import math
import pytest

from stationwx.weather.parser import ReportLineParser, parse_line
from stationwx.weather.models import ParsedConditions, NOT_REPORTED


class TestCeiling:
    """Test cloud layer ceiling extraction."""

    def test_broken_layer(self):
        conditions = ReportLineParser.parse_line("KJFK 291951Z 18010KT 10SM BKN005")
        assert conditions.ceiling == 500

    def test_overcast_layer(self):
        conditions = ReportLineParser.parse_line("KJFK 291951Z 18010KT P6SM OVC020")
        assert conditions.ceiling == 2000

    def test_vertical_visibility(self):
        conditions = ReportLineParser.parse_line("KSFO 291951Z 00000KT 1/4SM FG VV001")
        assert conditions.ceiling == 100

    def test_first_layer_wins(self):
        conditions = ReportLineParser.parse_line("KJFK 291951Z 10SM OVC030 BKN008")
        assert conditions.ceiling == 3000

    def test_few_and_scattered_are_not_ceilings(self):
        conditions = ReportLineParser.parse_line("KJFK 291951Z 10SM FEW005 SCT010")
        assert conditions.ceiling == NOT_REPORTED

    def test_layer_requires_three_digits(self):
        conditions = ReportLineParser.parse_line("BKN05 OVC")
        assert math.isinf(conditions.ceiling)


class TestVisibility:
    """Test statute-mile visibility extraction."""

    def test_whole_miles(self):
        conditions = ReportLineParser.parse_line("KJFK 291951Z 18010KT 10SM FEW250")
        assert conditions.vis_miles == 10
        assert conditions.is_greater is False

    def test_greater_than(self):
        conditions = ReportLineParser.parse_line("KJFK 291951Z 18010KT P6SM OVC020")
        assert conditions.vis_miles == 6
        assert conditions.is_greater is True

    def test_fraction(self):
        conditions = ReportLineParser.parse_line("KJFK 291951Z 18010KT 1/2SM BKN005")
        assert conditions.vis_miles == 0.5

    def test_fraction_not_read_as_whole_number(self):
        conditions = ReportLineParser.parse_line("3/4SM")
        assert conditions.vis_miles == 0.75

    def test_mixed_number(self):
        conditions = ReportLineParser.parse_line("KBOS 291951Z 04012KT 1 1/2SM BR OVC004")
        assert conditions.vis_miles == 1.5

    def test_less_than_prefix(self):
        conditions = ReportLineParser.parse_line("KSFO 291951Z 00000KT M1/4SM FG VV001")
        assert conditions.vis_miles == 0.25
        assert conditions.is_greater is False

    def test_first_group_wins(self):
        conditions = ReportLineParser.parse_line("TEMPO 3SM BR 1SM")
        assert conditions.vis_miles == 3

    def test_zero_denominator_is_not_reported(self):
        conditions = ReportLineParser.parse_line("1/0SM")
        assert conditions.vis_miles == NOT_REPORTED

    def test_metric_visibility_ignored(self):
        conditions = ReportLineParser.parse_line("LFPG 291930Z 24015KT 9999 FEW040")
        assert conditions.vis_miles == NOT_REPORTED


class TestNoWeatherGroups:
    """Lines without ceiling or visibility groups."""

    @pytest.mark.parametrize("line", [
        "",
        "RMK AO2 SLP132 T01720089",
        "FM300000 20008KT",
        "KJFK 291951Z 18010KT A2992",
    ])
    def test_all_sentinels(self, line):
        conditions = ReportLineParser.parse_line(line)
        assert conditions == ParsedConditions(
            ceiling=math.inf, vis_miles=math.inf, is_greater=False
        )
        assert conditions.has_data is False

    def test_parse_conditions_handles_none(self):
        assert ReportLineParser.parse_conditions(None) == ParsedConditions()

    def test_module_shortcut(self):
        assert parse_line("OVC010").ceiling == 1000


class TestCleanReportText:
    """Test plain-text feed normalization."""

    def test_collapses_whitespace(self):
        cleaned = ReportLineParser.clean_report_text("KJFK  291951Z\n 18010KT   10SM")
        assert cleaned == "KJFK 291951Z 18010KT 10SM"

    def test_strips_report_keyword(self):
        assert ReportLineParser.clean_report_text("METAR KJFK 291951Z") == "KJFK 291951Z"

    def test_strips_trailing_keyword(self):
        assert ReportLineParser.clean_report_text("KJFK 291951Z TAF") == "KJFK 291951Z"

    def test_strips_nws_timestamp(self):
        raw = "2024/03/29 19:51\nKJFK 291951Z 18010KT 10SM"
        assert ReportLineParser.clean_report_text(raw) == "KJFK 291951Z 18010KT 10SM"

    def test_empty(self):
        assert ReportLineParser.clean_report_text(None) == ""
