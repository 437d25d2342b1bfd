"""Tests for unit-aware duration checks."""

from datetime import timedelta

import pytest

from fluent_pytest import Duration, DurationCheck, FluentCheckError, TimeUnit, check_that, discover_unit


# =============================================================================
# Units and durations
# =============================================================================


@pytest.mark.parametrize(
    "duration,unit",
    [
        (timedelta(0), TimeUnit.MICROSECONDS),
        (timedelta(microseconds=999), TimeUnit.MICROSECONDS),
        (timedelta(microseconds=1500), TimeUnit.MILLISECONDS),
        (timedelta(seconds=2), TimeUnit.SECONDS),
        (timedelta(seconds=90), TimeUnit.MINUTES),
        (timedelta(hours=5), TimeUnit.HOURS),
        (timedelta(days=3), TimeUnit.DAYS),
        (timedelta(days=14), TimeUnit.WEEKS),
        (timedelta(seconds=-2), TimeUnit.SECONDS),
    ],
)
def test_discover_unit(duration, unit):
    assert discover_unit(duration) is unit


def test_unit_conversion():
    assert TimeUnit.SECONDS.convert(1500, TimeUnit.MILLISECONDS) == 1.5
    assert TimeUnit.MILLISECONDS.convert(2, TimeUnit.SECONDS) == 2000
    assert TimeUnit.HOURS.convert(90, TimeUnit.MINUTES) == 1.5


def test_durations_compare_across_units():
    assert Duration(1000, TimeUnit.MILLISECONDS) == Duration(1, TimeUnit.SECONDS)
    assert Duration(1000, TimeUnit.MILLISECONDS) < Duration(2, TimeUnit.SECONDS)
    assert Duration(2, TimeUnit.MINUTES) > Duration(119, TimeUnit.SECONDS)
    assert hash(Duration(60, TimeUnit.SECONDS)) == hash(Duration(1, TimeUnit.MINUTES))


def test_duration_from_timedelta():
    duration = Duration.from_timedelta(timedelta(milliseconds=1500), TimeUnit.SECONDS)

    assert duration.value == 1.5
    assert duration.unit is TimeUnit.SECONDS
    assert duration.to_timedelta() == timedelta(milliseconds=1500)


def test_duration_str():
    assert str(Duration(1, TimeUnit.SECONDS)) == "1 Seconds"
    assert str(Duration(1.5, TimeUnit.MINUTES)) == "1.5 Minutes"
    assert repr(Duration(2, TimeUnit.DAYS)) == "Duration(2, TimeUnit.DAYS)"


# =============================================================================
# Checks
# =============================================================================


def test_timedelta_dispatches_to_duration_check():
    assert isinstance(check_that(timedelta(seconds=1)), DurationCheck)


def test_is_less_than_normalizes_units():
    check_that(timedelta(milliseconds=1000)).is_less_than(timedelta(seconds=2))
    check_that(timedelta(milliseconds=1000)).is_less_than(2, TimeUnit.SECONDS)


def test_is_less_than_is_strict():
    with pytest.raises(FluentCheckError):
        check_that(timedelta(seconds=2)).is_less_than(2, TimeUnit.SECONDS)


def test_is_less_than_failure():
    with pytest.raises(FluentCheckError) as exc_info:
        check_that(timedelta(seconds=5)).is_less_than(3, TimeUnit.SECONDS)

    assert str(exc_info.value) == (
        "\nThe checked value is more than the limit."
        "\nThe checked value:\n\t[5 Seconds]"
        "\nThe expected value: less than\n\t[3 Seconds]"
    )


def test_is_less_than_message_uses_comparand_unit():
    with pytest.raises(FluentCheckError) as exc_info:
        check_that(timedelta(seconds=3)).is_less_than(timedelta(milliseconds=500))

    assert str(exc_info.value) == (
        "\nThe checked value is more than the limit."
        "\nThe checked value:\n\t[3000 Milliseconds]"
        "\nThe expected value: less than\n\t[500 Milliseconds]"
    )


def test_not_is_less_than_failure():
    with pytest.raises(FluentCheckError) as exc_info:
        check_that(timedelta(seconds=1)).not_.is_less_than(2, TimeUnit.SECONDS)

    assert str(exc_info.value) == (
        "\nThe checked value is not more than the limit."
        "\nThe checked value:\n\t[1 Seconds]"
        "\nThe expected value: more than or equal to\n\t[2 Seconds]"
    )


def test_is_greater_than():
    check_that(timedelta(minutes=2)).is_greater_than(timedelta(seconds=90))
    check_that(timedelta(minutes=1)).not_.is_greater_than(60, TimeUnit.SECONDS)


def test_is_greater_than_failure():
    with pytest.raises(FluentCheckError) as exc_info:
        check_that(timedelta(seconds=1)).is_greater_than(2, TimeUnit.SECONDS)

    assert str(exc_info.value) == (
        "\nThe checked value is not more than the limit."
        "\nThe checked value:\n\t[1 Seconds]"
        "\nThe expected value: more than\n\t[2 Seconds]"
    )


def test_not_is_greater_than_failure():
    with pytest.raises(FluentCheckError) as exc_info:
        check_that(timedelta(seconds=3)).not_.is_greater_than(2, TimeUnit.SECONDS)

    assert str(exc_info.value) == (
        "\nThe checked value is more than the limit."
        "\nThe checked value:\n\t[3 Seconds]"
        "\nThe expected value: less than or equal to\n\t[2 Seconds]"
    )


def test_is_equal_to_across_units():
    check_that(timedelta(minutes=1)).is_equal_to(60, TimeUnit.SECONDS)
    check_that(timedelta(minutes=1)).is_equal_to(timedelta(seconds=60))
    check_that(timedelta(minutes=1)).not_.is_equal_to(61, TimeUnit.SECONDS)


def test_is_equal_to_failure():
    with pytest.raises(FluentCheckError) as exc_info:
        check_that(timedelta(seconds=2)).is_equal_to(3, TimeUnit.SECONDS)

    assert str(exc_info.value) == (
        "\nThe checked value is different from the expected value."
        "\nThe checked value:\n\t[2 Seconds]"
        "\nThe expected value:\n\t[3 Seconds]"
    )


def test_not_is_equal_to_failure():
    with pytest.raises(FluentCheckError) as exc_info:
        check_that(timedelta(seconds=2)).not_.is_equal_to(2000, TimeUnit.MILLISECONDS)

    assert str(exc_info.value) == (
        "\nThe checked value is the same than expected value."
        "\nThe checked value:\n\t[2000 Milliseconds]"
        "\nThe expected value: different than\n\t[2000 Milliseconds]"
    )


def test_number_comparand_requires_unit():
    with pytest.raises(TypeError):
        check_that(timedelta(seconds=1)).is_less_than(2)


def test_ordering_checks_still_available():
    check_that(timedelta(seconds=1)).is_before(timedelta(seconds=2)).and_.is_after(timedelta(0))
