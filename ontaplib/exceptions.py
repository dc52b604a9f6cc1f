# ontaplib/exceptions.py
from typing import Optional


class OntapLibError(Exception):
    """Base exception for ontaplib operations"""
    pass


class DiagnosticError(OntapLibError):
    """
    Caller-visible error carrying a short summary and a detailed message.
    Every adapter failure reaches the caller as one of these.
    """
    def __init__(self, summary: str, detail: str = ""):
        super().__init__(f"{summary}: {detail}" if detail else summary)
        self.summary = summary
        self.detail = detail


class TransportError(DiagnosticError):
    """Raised when a request failed or returned a non-success status"""
    def __init__(self, summary: str, detail: str = "", status_code: int = 0):
        super().__init__(summary, detail)
        self.status_code = status_code


class EmptyResponseError(DiagnosticError):
    """Raised when a successful call returned no body where one was expected"""
    pass


class NotFoundError(EmptyResponseError):
    """Raised when a single-record lookup matched nothing"""
    pass


class EncodeError(DiagnosticError):
    """Raised when a local structure cannot be flattened into a request"""
    pass


class DecodeError(DiagnosticError):
    """Raised when a response cannot be mapped onto the expected type"""
    pass


class RestError(OntapLibError):
    """Raised by RestClient when the HTTP call fails"""
    def __init__(self, status_code: int, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code


class RollbackError(OntapLibError):
    """Raised when rollback operations fail"""
    pass


class AdapterError(OntapLibError):
    """Raised when adapter operations fail"""
    pass


class ResourceNotFoundError(OntapLibError):
    """Raised when a resource cannot be found"""
    pass
