# ontaplib/error_handler.py
import logging
from typing import List, Type

from .exceptions import DiagnosticError

_LOGGER = logging.getLogger(__name__)


class ErrorHandler:
    """
    Single construction point for caller-visible errors.
    Each error is logged, kept in `diagnostics`, and returned for the caller to raise.
    `diagnostics` grows until `clear` is called; IPInterfaceAdapter clears it per operation.
    """
    def __init__(self, logger: logging.Logger = None):
        self.logger = logger or _LOGGER
        self.diagnostics: List[DiagnosticError] = []

    def make_and_report_error(self, summary: str, detail: str,
                              error_cls: Type[DiagnosticError] = DiagnosticError,
                              **attrs) -> DiagnosticError:
        error = error_cls(summary, detail, **attrs)
        self.logger.error("%s: %s", summary, detail)
        self.diagnostics.append(error)
        return error

    def has_errors(self) -> bool:
        return bool(self.diagnostics)

    def clear(self):
        self.diagnostics.clear()
