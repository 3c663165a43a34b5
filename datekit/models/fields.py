"""Raw date-time field model."""

from pydantic import BaseModel, ConfigDict, Field


class DateTimeFields(BaseModel):
    """Date and time fields stored as plain integers.

    Unlike :class:`datetime.datetime`, no calendar or clock validation is
    applied. Month and day may be zero and hours may exceed 23, which is what
    :meth:`~datekit.services.formatter.DateFormatter.get_date_difference`
    produces.

    Attributes:
        year (int): Year value.
        month (int): Month value.
        day (int): Day value.
        hour (int): Hour value.
        minute (int): Minute value.
        second (int): Second value.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(json_schema_extra={"order": 0, "justify": "right"})
    month: int = Field(json_schema_extra={"order": 1, "justify": "right"})
    day: int = Field(json_schema_extra={"order": 2, "justify": "right"})
    hour: int = Field(
        json_schema_extra={"order": 3, "justify": "right", "style": "cyan"}
    )
    minute: int = Field(
        json_schema_extra={"order": 4, "justify": "right", "style": "cyan"}
    )
    second: int = Field(
        json_schema_extra={"order": 5, "justify": "right", "style": "cyan"}
    )
