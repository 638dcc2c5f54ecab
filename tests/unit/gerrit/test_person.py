"""Unit tests for the GitPersonInfo model.

Tests decoding from the Gerrit wire shape, timestamp normalization,
immutability, and the debug rendering.
"""

import json
from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError
from treesync.gerrit.person import GitPersonInfo, PersonInfoError
from treesync.gerrit.timestamps import TimestampParseError


def _person(**overrides: object) -> GitPersonInfo:
    """Create a GitPersonInfo with sensible defaults."""
    data: dict[str, object] = {
        "name": "John Doe",
        "email": "john.doe@example.com",
        "date": "2016-01-01 10:00:00.000000000",
        "tz": -300,
    }
    data.update(overrides)
    return GitPersonInfo.from_dict(data)


class TestGitPersonInfoDecoding:
    """Tests for decoding person records."""

    def test_from_json(self, gerrit_person_json: str) -> None:
        """A Gerrit JSON body decodes into all four fields."""
        info = GitPersonInfo.from_json(gerrit_person_json)

        assert info.name == "John Doe"
        assert info.email == "john.doe@example.com"
        assert info.date == "2017-12-01 17:33:30.000000000"
        assert info.tz == -300

    def test_unknown_fields_ignored(self) -> None:
        """Extra keys in the API response are dropped."""
        info = _person(avatar="https://example.com/a.png")

        assert info.to_dict() == {
            "name": "John Doe",
            "email": "john.doe@example.com",
            "date": "2016-01-01 10:00:00.000000000",
            "tz": -300,
        }

    def test_tz_defaults_to_zero(self) -> None:
        """A missing tz means UTC."""
        info = GitPersonInfo.from_dict(
            {"name": "n", "email": "e@x", "date": "2016-01-01 10:00:00"}
        )

        assert info.tz == 0

    def test_round_trip_preserves_wire_shape(self, gerrit_person_json: str) -> None:
        """to_dict reproduces the original JSON object exactly."""
        info = GitPersonInfo.from_json(gerrit_person_json)

        assert info.to_dict() == json.loads(gerrit_person_json)
        assert list(info.to_dict()) == ["name", "email", "date", "tz"]

    @pytest.mark.parametrize(
        "data",
        [
            {"email": "e@x", "date": "2016-01-01 10:00:00", "tz": 0},
            {"name": "n", "date": "2016-01-01 10:00:00", "tz": 0},
            {"name": "n", "email": "e@x", "tz": 0},
            {"name": "n", "email": "e@x", "date": "2016-01-01 10:00:00", "tz": "-300"},
            {"name": "n", "email": "e@x", "date": "2016-01-01 10:00:00", "tz": 1.5},
        ],
    )
    def test_invalid_payload(self, data: dict[str, object]) -> None:
        """Missing fields or a non-integer tz raise PersonInfoError."""
        with pytest.raises(PersonInfoError) as exc_info:
            GitPersonInfo.from_dict(data)

        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_invalid_json(self) -> None:
        """Malformed JSON raises PersonInfoError."""
        with pytest.raises(PersonInfoError):
            GitPersonInfo.from_json("{not json")

    def test_person_info_error_is_value_error(self) -> None:
        """PersonInfoError can be caught as ValueError."""
        assert issubclass(PersonInfoError, ValueError)


class TestGitPersonInfoTimestamp:
    """Tests for the decoded timestamp."""

    def test_timestamp_at_person_offset(self) -> None:
        """The timestamp carries the person's offset and the same instant."""
        info = _person()

        assert info.timestamp.isoformat() == "2016-01-01T05:00:00-05:00"
        assert info.timestamp == datetime(2016, 1, 1, 10, 0, 0, tzinfo=UTC)

    def test_timestamp_minutes_not_hours(self) -> None:
        """tz=-5 is five minutes, not five hours."""
        info = _person(tz=-5)

        assert info.timestamp.utcoffset() == timedelta(minutes=-5)

    def test_bad_date_raises_on_access(self) -> None:
        """A malformed date is stored as-is and fails when decoded."""
        info = _person(date="yesterday")

        assert info.date == "yesterday"
        with pytest.raises(TimestampParseError):
            _ = info.timestamp


class TestGitPersonInfoBehaviour:
    """Tests for immutability and rendering."""

    def test_frozen(self) -> None:
        """Fields cannot be reassigned."""
        info = _person()

        with pytest.raises(ValidationError):
            info.name = "Jane"  # type: ignore[misc]

    def test_str_field_order(self) -> None:
        """The debug rendering lists name, email, date, tz in that order."""
        info = _person()

        assert str(info) == (
            "GitPersonInfo{name=John Doe, email=john.doe@example.com, "
            "date=2016-01-01 10:00:00.000000000, tz=-300}"
        )

    def test_repr_matches_str(self) -> None:
        """repr() uses the same rendering as str()."""
        info = _person()

        assert repr(info) == str(info)

    def test_equality_by_value(self) -> None:
        """Two records with the same fields compare equal."""
        assert _person() == _person()
        assert _person() != _person(tz=60)
