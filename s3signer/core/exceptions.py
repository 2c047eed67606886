"""Custom exceptions for s3signer.

This module provides a hierarchy of exceptions with helpful error messages
so that misconfiguration and bad requests are easy to diagnose.
"""


class S3SignerError(Exception):
    """Base exception for all s3signer errors.

    All s3signer exceptions inherit from this class, making it easy
    to catch all package-specific errors.
    """

    def __init__(self, message: str, hint: str | None = None):
        """Initialize the exception.

        Args:
            message: The error message
            hint: Optional hint for resolving the error
        """
        self.message = message
        self.hint = hint
        super().__init__(message)

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nHint: {self.hint}"
        return self.message


class S3ConnectionError(S3SignerError):
    """Raised when an S3 client cannot be created."""

    def __init__(
        self,
        message: str | None = None,
        original_error: Exception | None = None,
        endpoint: str | None = None,
    ):
        """Initialize the connection error.

        Args:
            message: Custom error message (optional)
            original_error: The original exception that caused this error
            endpoint: The S3 endpoint URL being connected to
        """
        self.original_error = original_error
        self.endpoint = endpoint

        hint = None
        if original_error and "credentials" in str(original_error).lower():
            hint = "Check AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY."
        elif endpoint and "localhost" in endpoint:
            hint = "If using LocalStack, ensure it's running on the configured port."

        super().__init__(message or f"Failed to create S3 client for {endpoint or 'AWS'}", hint)


class S3ConfigurationError(S3SignerError):
    """Raised when the signer configuration is invalid.

    Raised at construction time so that misconfiguration surfaces at
    startup rather than on the first request.
    """

    def __init__(
        self,
        message: str | None = None,
        missing_fields: list[str] | None = None,
    ):
        """Initialize the configuration error.

        Args:
            message: Custom error message
            missing_fields: List of missing configuration fields
        """
        self.missing_fields = missing_fields or []

        if missing_fields and not message:
            message = f"Missing required configuration: {', '.join(missing_fields)}"
            hint = "Set these as environment variables or pass them to S3SignerConfig."
        else:
            hint = "Check your s3signer configuration."

        super().__init__(message or "Invalid s3signer configuration", hint)


class MissingBucketError(S3ConfigurationError):
    """Raised when no bucket name is configured."""

    def __init__(self):
        super().__init__("bucket is required", missing_fields=["bucket"])


class MissingSignerError(S3ConfigurationError):
    """Raised when there is no way to produce signed URLs."""

    def __init__(self):
        super().__init__(
            "S3 client or a custom get_signed_url function is required",
            missing_fields=["s3_client", "get_signed_url"],
        )


class S3ValidationError(S3SignerError):
    """Raised when an incoming sign request is invalid.

    These errors are always the client's fault and map to HTTP 400.
    """

    status_code = 400
    error_type = "validation_error"

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: str | None = None,
    ):
        """Initialize the validation error.

        Args:
            message: The error message
            field: The field that failed validation
            value: The invalid value
        """
        self.field = field
        self.value = value

        hint = None
        if field:
            hint = f"Check the value for field '{field}'."

        super().__init__(message, hint)


class MissingParameterError(S3ValidationError):
    """Raised when a required query parameter is absent."""

    error_type = "missing_parameter"

    def __init__(self, message: str, fields: list[str]):
        self.fields = fields
        super().__init__(message, field=fields[0] if len(fields) == 1 else None)
        self.hint = f"Provide {' or '.join(fields)} as a query parameter."


class KeyRejectedError(S3ValidationError):
    """Raised when a derived object key does not match the configured pattern."""

    error_type = "key_rejected"

    def __init__(self, key: str, pattern: str):
        self.pattern = pattern
        super().__init__("Key does not match the regexp", field="key", value=key)
        self.hint = f"Keys must match the pattern '{pattern}'."
