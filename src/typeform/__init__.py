"""Typed, read-only client for Typeform form responses."""

from .client import DEFAULT_URL, Typeform
from .errors import (
    AnswerPayloadError,
    ApiError,
    DecodeError,
    RequestBuildError,
    TransportError,
    TypeformError,
)
from .models import (
    Answer,
    AnswerField,
    AnswerType,
    Calculated,
    Choice,
    Choices,
    Definition,
    FieldDefinition,
    Metadata,
    Payment,
    Response,
    Responses,
    decode_responses,
)

__all__ = [
    "DEFAULT_URL",
    "Answer",
    "AnswerField",
    "AnswerPayloadError",
    "AnswerType",
    "ApiError",
    "Calculated",
    "Choice",
    "Choices",
    "DecodeError",
    "Definition",
    "FieldDefinition",
    "Metadata",
    "Payment",
    "RequestBuildError",
    "Response",
    "Responses",
    "TransportError",
    "Typeform",
    "TypeformError",
    "decode_responses",
]
