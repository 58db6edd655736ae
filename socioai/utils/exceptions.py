"""Custom exceptions for the SocioAI client"""

from typing import List, Optional


class SocioAIError(Exception):
    """Base exception for SocioAI"""
    pass


class ValidationError(SocioAIError):
    """Local form validation failed. Never reaches the network."""

    def __init__(self, messages: List[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages) or "Invalid form")


class AuthError(SocioAIError):
    """No usable session (absent, undecodable or expired token)"""
    pass


class NetworkError(SocioAIError):
    """Request never got an HTTP response (DNS, refused connection, reset...)"""
    pass


class BackendError(SocioAIError):
    """Backend answered with an HTTP error status"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ConfigError(SocioAIError):
    """Configuration error"""
    pass
