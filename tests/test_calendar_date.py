from datetime import date, datetime, time

import pytest

from shamsi_calendar.api import gregorian, jalali
from shamsi_calendar.api.calendar_date import CalendarDate
from shamsi_calendar.api.errors import InvalidDate, InvalidYear
from shamsi_calendar.api.gregorian import GregorianDate
from shamsi_calendar.api.jalali import JalaliDate
from shamsi_calendar.api.views import GREGORIAN, JALALI


def test_round_trip_through_jalali_for_two_centuries():
    first = gregorian.to_jdn(1800, 1, 1)
    last = gregorian.to_jdn(2200, 12, 31)
    for jdn in range(first, last + 1):
        value = CalendarDate.from_jdn(jdn)
        again = CalendarDate.from_jalali(*value.jalali.as_tuple())
        assert again == value
        assert CalendarDate.from_gregorian(*value.gregorian.as_tuple()) == value


@pytest.mark.parametrize(
    "gregorian_fields,jalali_fields",
    [
        ((2024, 3, 20), (1403, 1, 1)),
        ((1979, 2, 11), (1357, 11, 22)),
    ],
)
def test_reference_fixed_points(gregorian_fields, jalali_fields):
    from_gregorian = CalendarDate.from_gregorian(*gregorian_fields)
    from_jalali = CalendarDate.from_jalali(*jalali_fields)
    assert from_gregorian == from_jalali
    assert from_gregorian.jalali == JalaliDate(*jalali_fields)
    assert from_jalali.gregorian == GregorianDate(*gregorian_fields)


def test_constructors_agree():
    expected = CalendarDate.from_gregorian(2024, 3, 20)
    assert CalendarDate.from_date(date(2024, 3, 20)) == expected
    assert CalendarDate.from_date(datetime(2024, 3, 20, 23, 59)) == expected
    assert CalendarDate.from_fields(1403, 1, 1, "jalali") == expected
    assert CalendarDate.from_fields(2024, 3, 20, "Gregorian") == expected
    assert CalendarDate.from_jdn(expected.jdn) == expected
    assert expected.to_date() == date(2024, 3, 20)


def test_now_uses_injected_clock():
    today = CalendarDate.now(lambda: datetime(2024, 3, 20, 8, 30))
    assert today.jalali == JalaliDate(1403, 1, 1)


def test_now_defaults_to_system_clock():
    assert CalendarDate.now().to_date() == date.today()


def test_values_are_immutable():
    value = CalendarDate.from_jalali(1403, 1, 1)
    with pytest.raises(AttributeError):
        value.jdn = 0  # type: ignore[misc]


def test_out_of_range_jdn_is_rejected():
    with pytest.raises(InvalidYear):
        CalendarDate.from_jdn(jalali.EPOCH_JDN - 1)
    with pytest.raises(InvalidYear):
        CalendarDate.from_gregorian(600, 1, 1)
    with pytest.raises(InvalidYear):
        CalendarDate.from_jalali(0, 1, 1)


def test_esfand_thirtieth_depends_on_leap_year():
    assert CalendarDate.from_jalali(1403, 12, 30).gregorian == GregorianDate(2025, 3, 20)
    with pytest.raises(InvalidDate):
        CalendarDate.from_jalali(1404, 12, 30)


@pytest.mark.parametrize(
    "fields,day_of_week",
    [
        ((2024, 3, 16), 0),  # Saturday
        ((2024, 3, 17), 1),
        ((2024, 3, 20), 4),  # Wednesday
        ((2024, 3, 22), 6),  # Friday
    ],
)
def test_day_of_week_starts_on_saturday(fields, day_of_week):
    value = CalendarDate.from_gregorian(*fields)
    assert value.day_of_week == day_of_week
    assert value.isoweekday == date(*fields).isoweekday()


def test_weekend_rules_per_view():
    friday = CalendarDate.from_gregorian(2024, 3, 22)
    saturday = CalendarDate.from_gregorian(2024, 3, 23)
    sunday = CalendarDate.from_gregorian(2024, 3, 24)

    assert friday.is_weekend(JALALI)
    assert not saturday.is_weekend(JALALI)
    assert friday.is_weekend(GREGORIAN)
    assert saturday.is_weekend(GREGORIAN)
    assert not sunday.is_weekend(GREGORIAN)


def test_comparison_is_by_jdn():
    earlier = CalendarDate.from_jalali(1402, 12, 29)
    later = CalendarDate.from_gregorian(2024, 3, 20)
    assert earlier < later
    assert earlier.compare(later) == -1
    assert later.compare(earlier) == 1
    assert later.compare(CalendarDate.from_jalali(1403, 1, 1)) == 0
    assert later.is_same_day(CalendarDate.from_jalali(1403, 1, 1))
    assert not later.is_same_day(earlier)
    assert len({later, CalendarDate.from_jalali(1403, 1, 1)}) == 1


def test_add_days_crosses_year_boundary():
    value = CalendarDate.from_jalali(1402, 12, 29)
    assert value.add_days(1).jalali == JalaliDate(1403, 1, 1)
    assert value.add_days(-365).add_days(365) == value
    assert value.add_days(0) is not value


@pytest.mark.parametrize(
    "start,months,expected",
    [
        ((1403, 6, 31), 1, (1403, 7, 30)),
        ((1403, 1, 15), -1, (1402, 12, 15)),
        ((1403, 11, 30), 1, (1403, 12, 30)),
        ((1402, 11, 30), 1, (1402, 12, 29)),
        ((1403, 5, 10), 14, (1404, 7, 10)),
        ((1403, 1, 31), -13, (1401, 12, 29)),
    ],
)
def test_add_months_in_jalali_view_clamps_day(start, months, expected):
    result = CalendarDate.from_jalali(*start).add_months(months, JALALI)
    assert result.jalali.as_tuple() == expected


@pytest.mark.parametrize(
    "start,months,expected",
    [
        ((2024, 1, 31), 1, (2024, 2, 29)),
        ((2023, 1, 31), 1, (2023, 2, 28)),
        ((2024, 12, 15), 1, (2025, 1, 15)),
        ((2024, 3, 31), -1, (2024, 2, 29)),
    ],
)
def test_add_months_in_gregorian_view_clamps_day(start, months, expected):
    result = CalendarDate.from_gregorian(*start).add_months(months, GREGORIAN)
    assert result.gregorian.as_tuple() == expected


def test_add_years_clamps_leap_days():
    assert CalendarDate.from_jalali(1403, 12, 30).add_years(1, JALALI).jalali == JalaliDate(1404, 12, 29)
    assert CalendarDate.from_gregorian(2024, 2, 29).add_years(1, GREGORIAN).gregorian == GregorianDate(2025, 2, 28)
    assert CalendarDate.from_gregorian(2024, 2, 29).add_years(4, GREGORIAN).gregorian == GregorianDate(2028, 2, 29)


def test_arithmetic_view_matters():
    value = CalendarDate.from_gregorian(2024, 3, 20)
    assert value.add_months(1, GREGORIAN).gregorian == GregorianDate(2024, 4, 20)
    assert value.add_months(1, JALALI).jalali == JalaliDate(1403, 2, 1)
    assert value.add_months(1, JALALI).gregorian == GregorianDate(2024, 4, 20)


def test_arithmetic_past_supported_range_raises():
    with pytest.raises(InvalidYear):
        CalendarDate.from_jalali(1, 1, 1).add_days(-1)
    with pytest.raises(InvalidYear):
        CalendarDate.from_jalali(1, 6, 1).add_years(-1, JALALI)


def test_field_queries_per_view():
    value = CalendarDate.from_jalali(1403, 12, 1)
    assert value.fields(JALALI) == (1403, 12, 1)
    assert value.fields(GREGORIAN) == (2025, 2, 19)
    assert value.days_in_month(JALALI) == 30
    assert value.days_in_month(GREGORIAN) == 28
    assert value.is_leap_year(JALALI)
    assert not value.is_leap_year(GREGORIAN)


def test_unknown_view_is_rejected():
    value = CalendarDate.from_jalali(1403, 1, 1)
    with pytest.raises(ValueError):
        value.fields("lunar")
    with pytest.raises(ValueError):
        value.add_months(1, "hebrew")


def test_format_jalali_tokens():
    value = CalendarDate.from_jalali(1403, 1, 1)
    assert value.format() == "1403-01-01"
    assert value.format("YYYY/M/D") == "1403/1/1"
    assert value.format("YY-MM-DD") == "03-01-01"
    assert value.format("D MMMM YYYY") == "1 فروردین 1403"
    assert value.format("dddd") == "چهارشنبه"
    assert value.format("ddd") == "چ"


def test_format_gregorian_tokens():
    value = CalendarDate.from_jalali(1403, 1, 1)
    assert value.format("ddd, D MMMM YYYY", GREGORIAN) == "Wed, 20 March 2024"
    assert value.format("dddd", GREGORIAN) == "Wednesday"
    assert value.format("YYYY-MM-DD", GREGORIAN) == "2024-03-20"


def test_format_year_is_not_padded():
    value = CalendarDate.from_gregorian(700, 5, 6)
    assert value.format("YYYY/MM/DD", GREGORIAN) == "700/05/06"
    assert value.format("YY", GREGORIAN) == "00"


def test_format_time_tokens_literals_and_digits():
    value = CalendarDate.from_jalali(1403, 1, 1)
    assert value.format("HH:mm:ss") == "00:00:00"
    assert value.format("YYYY HH:mm:ss", at=time(9, 5, 7)) == "1403 09:05:07"
    assert value.format("HH:mm", at=datetime(2024, 3, 20, 18, 45)) == "18:45"
    assert value.format("[Today is] dddd", GREGORIAN) == "Today is Wednesday"
    assert value.format("Q YYYY") == "Q 1403"
    assert value.format("YYYY/MM/DD", persian_digits=True) == "۱۴۰۳/۰۱/۰۱"


def test_string_forms():
    value = CalendarDate.from_jalali(1403, 1, 1)
    assert str(value) == "2024-03-20"
    assert value.isoformat() == "2024-03-20"
    assert value.isoformat(JALALI) == "1403-01-01"
