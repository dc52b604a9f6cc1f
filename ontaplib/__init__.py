# ontaplib/__init__.py
from .state_manager import ResourceManager
from .error_handler import ErrorHandler
from .rest_client import RestClient, RestQuery, RestResponse
from .exceptions import (
    OntapLibError, DiagnosticError, TransportError, EmptyResponseError, NotFoundError,
    EncodeError, DecodeError, RestError, RollbackError, AdapterError, ResourceNotFoundError
)

__version__ = "0.1.0"
__all__ = [
    "ResourceManager", "ErrorHandler", "RestClient", "RestQuery", "RestResponse",
    "OntapLibError", "DiagnosticError", "TransportError", "EmptyResponseError", "NotFoundError",
    "EncodeError", "DecodeError", "RestError", "RollbackError", "AdapterError", "ResourceNotFoundError"
]
