"""
Custom Exceptions for the image reporter
"""


class ImageReportError(Exception):
    """Base exception for all image reporter errors"""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# Validation Exceptions
class ValidationError(ImageReportError):
    """Input or remote runtime state failed validation"""

    pass


class AuthenticationError(ImageReportError):
    """Authentication failed"""

    pass


class MissingCredentialError(AuthenticationError):
    """CF_API_KEY was not supplied"""

    pass


# Transport Exceptions
class GraphQLRequestError(ImageReportError):
    """GraphQL request failed or returned errors"""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        status_code: int | None = None,
        errors: list | None = None,
    ):
        self.status_code = status_code
        self.errors = errors or []
        super().__init__(message, code)
