"""
Shared helpers: slugs, pagination arithmetic, LIKE escaping and validators.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from app.shared.core.exceptions import ValidationError
from app.shared.core.schemas import CamelModel, parse_update_payload
from app.shared.utils.formatters import format_time_diff
from app.shared.utils.helpers import (
    ensure_utc,
    escape_like,
    generate_slug,
    generate_unique_url,
    page_window,
    total_pages,
)
from app.shared.utils.validators import (
    validate_allowed_updates,
    validate_coordinates,
    validate_password_length,
)


class TestSlugs:

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Morning Runners", "morning-runners"),
            ("  Rock & Roll!! Club ", "rock-roll-club"),
            ("snake_case__title", "snake-case-title"),
            ("", ""),
        ],
    )
    def test_generate_slug(self, text, expected):
        assert generate_slug(text) == expected

    def test_slug_is_truncated_without_trailing_dash(self):
        slug = generate_slug("word " * 30)

        assert len(slug) <= 50
        assert not slug.endswith("-")

    def test_unique_url_appends_epoch_millis(self):
        now = datetime(2024, 6, 10, 6, 13, 20, tzinfo=timezone.utc)

        assert generate_unique_url("Morning Runners", now) == "morning-runners-1718000000000"

    def test_unique_url_falls_back_when_slug_is_empty(self):
        now = datetime(2024, 6, 10, 6, 13, 20, tzinfo=timezone.utc)

        assert generate_unique_url("!!!", now) == "item-1718000000000"


class TestPagination:

    def test_page_window(self):
        assert page_window(1, 20) == (0, 20)
        assert page_window(3, 10) == (20, 10)
        assert page_window(0, 10) == (0, 10)

    def test_total_pages(self):
        assert total_pages(0, 10) == 0
        assert total_pages(10, 10) == 1
        assert total_pages(11, 10) == 2
        assert total_pages(5, 0) == 0


def test_escape_like():
    assert escape_like("100%") == "100\\%"
    assert escape_like("a_b") == "a\\_b"
    assert escape_like("back\\slash") == "back\\\\slash"


def test_ensure_utc_attaches_timezone():
    naive = datetime(2024, 1, 1, 12, 0)
    offset = datetime(2024, 1, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))

    assert ensure_utc(naive).tzinfo == timezone.utc
    assert ensure_utc(offset) == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert ensure_utc(None) is None


class TestFormatTimeDiff:

    reference = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "delta, expected",
        [
            (timedelta(days=2, hours=5), "2 d"),
            (timedelta(hours=3, minutes=59), "3 h"),
            (timedelta(minutes=7), "7 min"),
            (timedelta(seconds=42), "42 sec"),
        ],
    )
    def test_largest_unit(self, delta, expected):
        assert format_time_diff(self.reference - delta, self.reference) == expected

    def test_future_moment_is_zero(self):
        assert format_time_diff(self.reference + timedelta(minutes=5), self.reference) == "0 sec"


class TestValidators:

    def test_allowed_updates(self):
        payload = {"tagline": "x"}

        assert validate_allowed_updates(payload, {"tagline", "title"}) is payload

    def test_rejected_keys_are_listed(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_allowed_updates({"ownerId": "1", "tagline": "x", "admin": True}, {"tagline"})

        assert exc_info.value.message == "Invalid updates!"
        assert exc_info.value.details["rejected"] == ["admin", "ownerId"]

    def test_empty_update(self):
        with pytest.raises(ValidationError):
            validate_allowed_updates({}, {"tagline"})

    def test_password_length(self):
        assert validate_password_length("longenough", 8) == "longenough"
        with pytest.raises(ValidationError) as exc_info:
            validate_password_length("short", 8)
        assert exc_info.value.details["field"] == "password"

    @pytest.mark.parametrize("lat, lng", [(91, 0), (-91, 0), (0, 181), (0, -180.5)])
    def test_coordinates_out_of_range(self, lat, lng):
        with pytest.raises(ValidationError):
            validate_coordinates(lat, lng)

    def test_coordinates_on_the_edge(self):
        validate_coordinates(90, -180)


class _Profile(CamelModel):
    full_name: Optional[str] = None
    is_private: Optional[bool] = None


class TestParseUpdatePayload:

    def test_returns_snake_case_fields_that_were_sent(self):
        parsed = parse_update_payload(_Profile, {"fullName": "Ada"}, {"fullName", "isPrivate"})

        assert parsed == {"full_name": "Ada"}

    def test_schema_errors_become_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_update_payload(_Profile, {"isPrivate": "maybe"}, {"isPrivate"})

        assert exc_info.value.details["errors"][0]["field"] == "isPrivate"
