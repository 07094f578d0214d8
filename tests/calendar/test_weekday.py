"""
tests/calendar/test_weekday.py

Covers:
  - Name parsing (case, whitespace, unknown names)
  - Alignment with date.weekday()
  - The default working week
"""

from datetime import date

import pytest

from bizcal.calendar import WORKWEEK, Weekday


class TestFromName:

    @pytest.mark.parametrize("name", ["monday", "Monday", "MONDAY", "  mOnDaY\n"])
    def test_case_and_whitespace_insensitive(self, name):
        assert Weekday.from_name(name) is Weekday.MONDAY

    def test_all_names(self):
        names = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
        assert [Weekday.from_name(n) for n in names] == list(Weekday)

    @pytest.mark.parametrize("name", ["mon", "funday", ""])
    def test_unknown_name_raises(self, name):
        with pytest.raises(ValueError, match="Unknown weekday"):
            Weekday.from_name(name)


class TestAlignment:

    def test_values_match_date_weekday(self):
        # 2022-10-03 is a Monday
        for offset, day in enumerate(Weekday):
            assert Weekday.of(date(2022, 10, 3 + offset)) is day

    def test_str_is_lowercase_name(self):
        assert str(Weekday.SATURDAY) == "saturday"

    def test_workweek(self):
        assert WORKWEEK == {Weekday(i) for i in range(5)}
        assert Weekday.SATURDAY not in WORKWEEK
