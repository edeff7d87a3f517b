# app/errors.py
from typing import Optional


class CardScannerError(Exception):
    """Base error for failures that map onto an HTTP status."""
    status_code = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return {"success": False, "error": self.message, "details": self.details}


class ValidationError(CardScannerError):
    """Bad or missing upload, malformed request body."""
    status_code = 400


class ExtractionError(CardScannerError):
    """The external vision model call failed."""
    status_code = 500


class PersistenceError(CardScannerError):
    """The card store could not be read or written."""
    status_code = 500


class ConfigError(Exception):
    """Required configuration is missing or malformed."""
