"""Gerrit GitPersonInfo record.

Mirrors the ``GitPersonInfo`` entity of the Gerrit REST API, which
describes the author or committer of a commit:

    {"name": "John Doe", "email": "john.doe@example.com",
     "date": "2017-12-01 17:33:30.000000000", "tz": -300}

``date`` is kept exactly as received; ``tz`` is the person's offset from
UTC in minutes.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from treesync.gerrit.timestamps import decode_timestamp


class PersonInfoError(ValueError):
    """Raised when a person record cannot be decoded."""


class GitPersonInfo(BaseModel):
    """Author or committer of a Gerrit commit.

    Attributes:
        name: Person name.
        email: Person email address.
        date: Raw timestamp string as sent by Gerrit.
        tz: Offset from UTC in minutes.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    email: str
    date: str
    tz: Annotated[int, Field(strict=True, description="Offset from UTC in minutes")] = 0

    @property
    def timestamp(self) -> datetime:
        """Commit time at the person's own UTC offset.

        Raises:
            TimestampParseError: If ``date`` or ``tz`` cannot be decoded.
        """
        return decode_timestamp(self.date, self.tz)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GitPersonInfo":
        """Decode a person record from a parsed JSON object.

        Raises:
            PersonInfoError: If required fields are missing or mistyped.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise PersonInfoError(f"Invalid GitPersonInfo: {e}") from e

    @classmethod
    def from_json(cls, text: str | bytes) -> "GitPersonInfo":
        """Decode a person record from a JSON document.

        Raises:
            PersonInfoError: If the JSON is malformed or does not describe
                a person.
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise PersonInfoError(f"Invalid GitPersonInfo: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the Gerrit wire shape."""
        return {"name": self.name, "email": self.email, "date": self.date, "tz": self.tz}

    def __str__(self) -> str:
        return (
            f"GitPersonInfo{{name={self.name}, email={self.email}, "
            f"date={self.date}, tz={self.tz}}}"
        )

    def __repr__(self) -> str:
        return str(self)
