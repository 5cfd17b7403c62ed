"""Core enumerations shared by the runner, pager and poller.

Key Types:
    - HttpMethod: Verbs used by the route table
    - OperationState: Lifecycle of a long-running operation
    - FinalStateVia: Where the final result of a finished operation is read from
"""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP verbs supported by the transport."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


class OperationState(str, Enum):
    """Lifecycle of a long-running operation.

    ACCEPTED and IN_PROGRESS are the only non-terminal states.
    """

    ACCEPTED = "Accepted"
    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"

    @property
    def is_terminal(self) -> bool:
        return self in (OperationState.SUCCEEDED, OperationState.FAILED, OperationState.CANCELED)

    @classmethod
    def from_status(cls, value: str | None) -> "OperationState":
        """Map a server-reported status string to a state.

        Unrecognized or missing values are treated as still running.
        """
        if not value:
            return cls.IN_PROGRESS
        normalized = value.strip().lower()
        if normalized == "succeeded":
            return cls.SUCCEEDED
        if normalized == "failed":
            return cls.FAILED
        if normalized in ("canceled", "cancelled"):
            return cls.CANCELED
        return cls.IN_PROGRESS


class FinalStateVia(str, Enum):
    """Where the final payload of a succeeded operation comes from."""

    AZURE_ASYNC_OPERATION = "azure-async-operation"
    LOCATION = "location"
    ORIGINAL_URI = "original-uri"
