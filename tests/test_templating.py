"""
Tests for the template filters.
"""

import pytest

from weather_web.templating import compass, fmt_number, localtime, templates


class TestLocaltime:
    def test_applies_offset(self):
        # 2023-10-17 11:08:01 UTC
        assert localtime(1697540881) == "11:08"
        assert localtime(1697540881, -14400) == "07:08"

    def test_positive_offset_crosses_midnight(self):
        # 2023-10-17 22:08:25 UTC in Tokyo
        assert localtime(1697580505, 32400) == "07:08"


class TestCompass:
    @pytest.mark.parametrize(
        "degrees,point",
        [(0, "N"), (45, "NE"), (180, "S"), (230, "SW"), (350, "N"), (360, "N"),
         (11.25, "NNE"), (292, "WNW")],
    )
    def test_points(self, degrees, point):
        assert compass(degrees) == point


class TestNumber:
    def test_whole_numbers_lose_decimal(self):
        assert fmt_number(69.0) == "69"
        assert fmt_number(-3.0) == "-3"

    def test_fractions_kept(self):
        assert fmt_number(8.05) == "8.05"


def test_filters_registered():
    for name in ("localtime", "compass", "number"):
        assert name in templates.env.filters
