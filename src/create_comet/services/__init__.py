from .base import BaseService
from .errors import (
    DependencyMissingError,
    ExternalCommandFailedError,
    IoFailedError,
    ServiceError,
    ValidationFailedError,
)
from .result import (
    ServiceCancelled,
    ServiceFailure,
    ServiceResult,
    ServiceSuccess,
    service_cancelled,
    service_failure,
    service_success,
)

__all__ = [
    "BaseService",
    "DependencyMissingError",
    "ExternalCommandFailedError",
    "IoFailedError",
    "ServiceCancelled",
    "ServiceError",
    "ServiceFailure",
    "ServiceResult",
    "ServiceSuccess",
    "ValidationFailedError",
    "service_cancelled",
    "service_failure",
    "service_success",
]
