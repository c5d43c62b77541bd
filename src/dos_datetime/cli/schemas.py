"""Pydantic schemas for JSON output validation.

Every --json document printed by dosdt is one of these models:
- encode: EncodeSuccessResponse | ErrorResponse
- decode: DecodeSuccessResponse | ErrorResponse

Hex strings are lowercase with a 0x prefix and zero padded to the word
size (4 digits for 16-bit words, 8 for the 32-bit value).
"""

from typing import Literal

from pydantic import BaseModel, Field

from ..models import DateTimeFields


# ============================================================================
# Base Response Models
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response for all commands.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code
        message: Human-readable error message
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["too_many_arguments", "parse_error", "invalid_argument"],
    )
    message: str = Field(description="Human-readable error description")


class FieldsModel(BaseModel):
    """Separated date/time fields.

    Only non-negativity is enforced: decoded bit patterns and loose-mode
    input may fall outside the calendar ranges.
    """

    year: int = Field(ge=0)
    month: int = Field(ge=0)
    day: int = Field(ge=0)
    hour: int = Field(ge=0)
    minute: int = Field(ge=0)
    second: int = Field(ge=0)
    millisecond: int = Field(ge=0)

    @classmethod
    def from_fields(cls, fields: DateTimeFields) -> "FieldsModel":
        return cls(**fields._asdict())


class PackedModel(BaseModel):
    """A DOS date/time in its packed forms."""

    dos_date: str = Field(pattern=r"^0x[0-9a-f]{4}$", description="16-bit date word")
    dos_time: str = Field(pattern=r"^0x[0-9a-f]{4}$", description="16-bit time word")
    dos_datetime: str = Field(
        pattern=r"^0x[0-9a-f]{8}$", description="32-bit concatenation, date high"
    )
    value: int = Field(ge=0, le=0xFFFFFFFF, description="32-bit value as integer")
    zip_bytes: str = Field(description="Hex of the 4 bytes stored in ZIP headers")


# ============================================================================
# Encode Command Response
# ============================================================================


class EncodeSuccessResponse(PackedModel):
    """Response for a successful encode.

    Attributes:
        status: Always "success"
        mode: Validation contract that was applied
        source: "arguments" or "clock" when no fields were given
        time: The date/time used, as 'DD.MM.YYYY  HH:MM:SS.mmm'
        fields: The field values used
    """

    status: Literal["success"] = "success"
    mode: Literal["strict", "loose"]
    source: Literal["arguments", "clock"]
    time: str
    fields: FieldsModel


# ============================================================================
# Decode Command Response
# ============================================================================


class DecodeSuccessResponse(PackedModel):
    """Response for a successful decode.

    Attributes:
        status: Always "success"
        fields: Decoded fields (millisecond always 0)
        time: Decoded date/time as 'DD.MM.YYYY  HH:MM:SS.mmm'
        valid_date: Whether the fields name a real calendar date/time
    """

    status: Literal["success"] = "success"
    time: str
    fields: FieldsModel
    valid_date: bool


EncodeResponse = EncodeSuccessResponse | ErrorResponse
DecodeResponse = DecodeSuccessResponse | ErrorResponse
