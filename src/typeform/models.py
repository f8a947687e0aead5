"""Pydantic data models for the Typeform responses payload."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import AnswerPayloadError, DecodeError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class _Model(BaseModel):
    # Typeform adds fields over time; unknown keys are dropped, not rejected.
    # Values must already have the declared JSON type: "42" is not a number.
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)


# ── Answer payloads ───────────────────────────────────────────────────

class Choice(_Model):
    """Single choice answer for dropdown-like fields."""

    label: str
    other: str | None = None


class Choices(_Model):
    """Multiple choice answer."""

    labels: list[str]
    other: str | None = None


class Payment(_Model):
    amount: str
    last4: str
    name: str


# ── Answers ───────────────────────────────────────────────────────────

class AnswerType(str, Enum):
    CHOICE = "choice"
    CHOICES = "choices"
    DATE = "date"
    EMAIL = "email"
    URL = "url"
    FILE_URL = "file_url"
    NUMBER = "number"
    BOOLEAN = "boolean"
    TEXT = "text"
    PAYMENT = "payment"
    PHONE_NUMBER = "phone_number"


# Each discriminant names the slot that carries its payload.
PAYLOAD_SLOTS = tuple(t.value for t in AnswerType)


class AnswerField(_Model):
    """The form field an answer refers to.

    `ref` is the reference set when the form was created; use it to match
    answers with questions across form revisions.
    """

    id: str
    type: str
    ref: str
    title: str | None = None


class Answer(_Model):
    """One question's answer.

    On the wire this is a flat record: a `type` discriminant plus eleven
    optional payload slots, decoded independently of each other. `value`
    gives the checked, single payload.
    """

    field: AnswerField
    type: AnswerType
    choice: Choice | None = None
    choices: Choices | None = None
    date: str | None = None
    email: str | None = None
    url: str | None = None
    file_url: str | None = None
    number: Int32 | None = None
    boolean: bool | None = None
    text: str | None = None
    payment: Payment | None = None
    phone_number: str | None = None

    @property
    def populated_slots(self) -> list[str]:
        return [slot for slot in PAYLOAD_SLOTS if getattr(self, slot) is not None]

    @property
    def value(self) -> Any:
        """Return the payload named by `type`.

        Raises AnswerPayloadError if that payload is missing or another
        payload slot is populated as well.
        """
        expected = self.type.value
        populated = self.populated_slots
        if expected not in populated:
            raise AnswerPayloadError(
                f"Answer to field {self.field.id} has type {expected!r} but no {expected!r} payload"
            )
        extra = [slot for slot in populated if slot != expected]
        if extra:
            raise AnswerPayloadError(
                f"Answer to field {self.field.id} has type {expected!r} "
                f"but also carries {', '.join(extra)}"
            )
        return getattr(self, expected)


# ── Response record ──────────────────────────────────────────────────

class Metadata(_Model):
    """Metadata about the respondent's HTTP request."""

    user_agent: str
    platform: str | None = None  # derived from user agent
    referer: str
    network_id: str  # client IP


class FieldDefinition(_Model):
    id: str
    type: str
    title: str
    description: str


class Definition(_Model):
    """Subset of the form definition included with a submission."""

    fields: list[FieldDefinition]


class Calculated(_Model):
    score: Int32


class Response(_Model):
    """One form submission.

    `response_id` is unique per form only; `token` is unique per request.
    Timestamps are ISO 8601 UTC, to the second.
    """

    token: str
    response_id: str | None = None
    landed_at: datetime
    submitted_at: datetime
    metadata: Metadata
    definition: Definition | None = None
    answers: list[Answer] | None = None
    calculated: Calculated

    def answer_for(self, key: str) -> Answer | None:
        """Find the first answer whose field id or ref equals `key`."""
        for answer in self.answers or []:
            if key in (answer.field.id, answer.field.ref):
                return answer
        return None


# ── Paged collection ─────────────────────────────────────────────────

class Responses(_Model):
    """One page of form responses, in the order Typeform returned them."""

    total_items: int | None = Field(default=None, ge=0)
    page_count: int | None = Field(default=None, ge=0)
    items: list[Response]

    @property
    def last_token(self) -> str | None:
        """Cursor for the next page request, or None for an empty page."""
        if not self.items:
            return None
        return self.items[-1].token


def decode_responses(raw: bytes | str) -> Responses:
    """Parse a JSON responses payload, raising DecodeError on any mismatch."""
    try:
        return Responses.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError(
            f"Failed to deserialize a response: {e}",
            errors=e.errors(include_url=False),
        ) from e
