from enum import Enum
from typing import Optional


class RequestErrorKind(str, Enum):
    """Reasons a request body could not be built."""
    NO_MODEL_SPECIFIED = "no_model_specified"


class RelayError(Exception):
    pass


class RequestBuildError(RelayError):
    """Raised when a failed build result is unwrapped."""
    
    def __init__(self, kind: RequestErrorKind, message: Optional[str] = None):
        self.kind = kind
        super().__init__(message or kind.value)


class RoutingError(RelayError):
    pass
