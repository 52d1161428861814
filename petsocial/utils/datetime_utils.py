# petsocial/utils/datetime_utils.py
"""
Date/time conventions for every Firestore document in the service.

Timestamps are stored timezone-aware in UTC. Firestore has no date-only type,
so a plain ``date`` (a pet's birth date) is written as midnight UTC and turned
back into a ``date`` by the model that owns it.
"""

import logging
from datetime import datetime, date, time, timezone
from typing import Any

from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)


class DateTimeUtils:

    @staticmethod
    def now() -> datetime:
        return datetime.now(timezone.utc)

    @staticmethod
    def to_utc(value: datetime) -> datetime:
        """Naive values are taken as UTC; aware ones are converted."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @staticmethod
    def parse_iso_datetime(text: str) -> datetime:
        """
        ISO 8601 text to a UTC datetime. Accepts a trailing ``Z``, an explicit
        offset or no offset at all (read as UTC).
        """
        if not text:
            raise ValueError("Cannot parse an empty string")
        try:
            parsed = dateutil_parser.isoparse(text)
        except (ValueError, OverflowError) as e:
            logger.error(f"ISO datetime parse failed: {text} - {e}")
            raise ValueError(f"Invalid ISO datetime: {text}")
        return DateTimeUtils.to_utc(parsed)

    @staticmethod
    def parse_date_string(text: str) -> date:
        """Loose date parsing: 2024-01-15, 2024/01/15 and 01-15-2024 all work."""
        if not text:
            raise ValueError("Cannot parse an empty string")
        try:
            return dateutil_parser.parse(text).date()
        except (ValueError, OverflowError) as e:
            logger.error(f"Date string parse failed: {text} - {e}")
            raise ValueError(f"Invalid date: {text}")

    @staticmethod
    def to_iso_string(value: datetime) -> str:
        return DateTimeUtils.to_utc(value).isoformat().replace('+00:00', 'Z')

    @staticmethod
    def for_firestore(value: Any) -> Any:
        """Converts a value (recursing into dicts and lists) before a Firestore write."""
        if isinstance(value, datetime):
            return DateTimeUtils.to_utc(value)
        if isinstance(value, date):
            return datetime.combine(value, time.min, tzinfo=timezone.utc)
        if isinstance(value, dict):
            return {key: DateTimeUtils.for_firestore(item) for key, item in value.items()}
        if isinstance(value, list):
            return [DateTimeUtils.for_firestore(item) for item in value]
        return value

    @staticmethod
    def from_firestore(value: Any) -> Any:
        """Timestamps read back from Firestore (or legacy ISO strings) as UTC datetimes."""
        if isinstance(value, datetime):
            return DateTimeUtils.to_utc(value)
        if isinstance(value, str):
            return DateTimeUtils.parse_iso_datetime(value)
        return value
