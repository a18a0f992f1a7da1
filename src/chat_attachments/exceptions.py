"""Custom exceptions for the chat attachments library."""


class ChatAttachmentsException(Exception):
    """Base exception for the chat attachments library.

    All custom exceptions in this package should inherit from this base class.
    """

    pass


class UnreadableFileError(ChatAttachmentsException):
    """Raised when an attached file cannot be read.

    This exception is raised when:
    - The backing file is missing or not readable
    - The underlying byte source raises an I/O error mid-read

    Attributes:
        filename: Name of the file that could not be read
        original_error: The original exception raised by the read
    """

    def __init__(
        self,
        message: str,
        filename: str | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.filename = filename
        self.original_error = original_error


class EmbeddingServiceError(ChatAttachmentsException):
    """Raised when the PDF embedding service call fails.

    This exception is raised when:
    - The service answers with a non-success HTTP status
    - The request cannot be delivered (connection errors)

    No partial attachment is created when this is raised, and the call is
    never retried.

    Attributes:
        status_code: HTTP status returned by the service, if any
        original_error: The original transport exception, if any
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.original_error = original_error


class ConfigurationException(ChatAttachmentsException):
    """Raised when configuration errors occur.

    This exception is raised when:
    - The backend base URL is missing
    - Environment setup is incorrect

    Attributes:
        config_key: The configuration key that caused the error
        config_value: The invalid configuration value
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        config_value: str | None = None,
    ):
        super().__init__(message)
        self.config_key = config_key
        self.config_value = config_value
