"""Runtime components: transport, serialization, paging and operation polling."""

from .lro import DEFAULT_POLLING_INTERVAL, LROPoller, OperationRequest, parse_retry_after
from .paging import AsyncPager
from .serializer import Serializer

__all__ = [
    "AsyncPager",
    "LROPoller",
    "OperationRequest",
    "DEFAULT_POLLING_INTERVAL",
    "parse_retry_after",
    "Serializer",
]
