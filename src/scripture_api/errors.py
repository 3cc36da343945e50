"""Caller-facing error kinds and the upstream failure types behind them."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error categories that cross the RPC boundary."""
    UNAUTHENTICATED = "UNAUTHENTICATED"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    FAILED_PRECONDITION = "FAILED_PRECONDITION"
    INTERNAL = "INTERNAL"


HTTP_STATUS_BY_CODE = {
    ErrorCode.UNAUTHENTICATED: 401,
    ErrorCode.INVALID_ARGUMENT: 400,
    ErrorCode.FAILED_PRECONDITION: 400,
    ErrorCode.INTERNAL: 500,
}


class CallableError(Exception):
    """A categorized error returned to the client as an error envelope."""

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    @property
    def http_status(self) -> int:
        return HTTP_STATUS_BY_CODE[self.code]

    def to_dict(self) -> dict:
        return {"status": self.code.value, "message": self.message}


class ModelGatewayError(RuntimeError):
    """Base class for failures reported by the model provider."""


class PromptBlockedError(ModelGatewayError):
    """The provider refused the prompt itself (prompt feedback carries a block reason)."""

    def __init__(self, block_reason: str):
        super().__init__(f"Content blocked: {block_reason}")
        self.block_reason = block_reason


class CandidateBlockedError(ModelGatewayError):
    """Generation stopped for a policy reason such as SAFETY or RECITATION."""

    def __init__(self, finish_reason: str):
        super().__init__(f"Candidate was blocked due to {finish_reason}")
        self.finish_reason = finish_reason


class EmptyGenerationError(ModelGatewayError):
    """The provider answered without any text."""

    def __init__(self):
        super().__init__("Model returned an empty response")


class StructuredOutputError(RuntimeError):
    """The model answered, but no usable JSON payload could be extracted."""
