from datetime import date, timedelta

import pytest

from cvforge.dates import (
    FONT_AWESOME_MAP,
    calculate_age,
    convert_date_format,
    font_awesome_icon,
    format_date_for_input,
)


def test_age_is_zero_on_birth_day():
    assert calculate_age("1995-08-20", today=date(1995, 8, 20)) == 0


def test_age_increments_on_birthday():
    birthday = date(2020, 8, 20)
    before = calculate_age("1995-08-20", today=birthday - timedelta(days=1))
    on = calculate_age("1995-08-20", today=birthday)
    assert on - before == 1


def test_age_counts_full_years():
    assert calculate_age("1990-01-01", today=date(2000, 1, 1)) == 2000 - 1990


def test_age_without_today_is_not_negative_for_past_date():
    assert calculate_age("2000-01-01") >= 24


def test_age_rejects_bad_date():
    with pytest.raises(ValueError):
        calculate_age("not-a-date")


def test_convert_keeps_now():
    assert convert_date_format("Now") == "Now"


@pytest.mark.parametrize("value", ["2021-03-04", "03/04/2021", "04-03-2021"])
def test_convert_accepts_all_formats(value):
    assert convert_date_format(value) == "03/2021"


def test_convert_falls_back_for_garbage():
    assert convert_date_format("someday") == "01/2000"


def test_convert_output_shape():
    result = convert_date_format("1999-12-31")
    month, year = result.split("/")
    assert (len(month), len(year)) == (2, 4)
    assert year == "1999"


def test_format_date_for_input_takes_date_part():
    assert format_date_for_input("2021-03-04T10:20:30Z") == "2021-03-04"


def test_format_date_for_input_fallback():
    assert format_date_for_input("2021-03-04") == "2000-01-01"


def test_font_awesome_known_icon():
    assert font_awesome_icon("Github") == "fab fa-github"
    assert font_awesome_icon("Address") == "fas fa-map-marker-alt"


def test_font_awesome_unknown_icon_uses_default():
    assert font_awesome_icon("Nope", "fas fa-link") == "fas fa-link"
    assert font_awesome_icon("Nope") is None


def test_font_awesome_map_classes_are_prefixed():
    assert all(v.startswith(("fab ", "fas ")) for v in FONT_AWESOME_MAP.values())