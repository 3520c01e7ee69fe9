"""
Custom exceptions for the academic records model.
"""

from typing import Optional, Any, Dict


class UniversityError(Exception):
    """Raised when an operation would break a roster or enrollment invariant."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'error': self.error_code,
            'message': self.message,
            'details': self.details,
        }
