import pytest

from models.errors import FormatError
from services.time_arithmetic import duration_minutes, interval, to_clock, to_minutes


class TestToMinutes:
    def test_parses_wall_clock(self):
        assert to_minutes("00:00") == 0
        assert to_minutes("09:30") == 570
        assert to_minutes("23:59") == 1439

    @pytest.mark.parametrize("literal", ["9:30", "24:00", "12:60", "12-30", "", "ab:cd", "12:30 ", "12:30\n"])
    def test_rejects_malformed_literal(self, literal):
        with pytest.raises(FormatError) as excinfo:
            to_minutes(literal)
        assert excinfo.value.literal == literal

    def test_rejects_non_string(self):
        with pytest.raises(FormatError):
            to_minutes(None)


class TestToClock:
    def test_formats_with_padding(self):
        assert to_clock(0) == "00:00"
        assert to_clock(545) == "09:05"
        assert to_clock(1439) == "23:59"

    def test_rejects_out_of_day_offset(self):
        with pytest.raises(FormatError):
            to_clock(1440)
        with pytest.raises(FormatError):
            to_clock(-1)


class TestDuration:
    def test_positive_duration(self):
        assert duration_minutes("09:00", "10:30") == 90

    def test_reversed_interval_is_zero_length(self):
        assert duration_minutes("18:00", "08:00") == 0
        assert interval("18:00", "08:00") == (1080, 1080)
