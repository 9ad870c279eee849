"""Custom exceptions for the Spendwise core.

Extraction and analytics never raise: every field has a fallback and every
division is guarded. The exceptions below are raised only by the mutable
collaborators around the core (the transaction ledger and configuration),
where bad input has to be corrected by the caller.

Example:
    try:
        ledger.update(transaction)
    except TransactionNotFoundError as e:
        logger.warning("stale_transaction", transaction_id=e.transaction_id)
    except SpendwiseError as e:
        # Handle any Spendwise-related error
        logger.error("ledger_failed", error=str(e))
"""

from typing import Any, Optional


class SpendwiseError(Exception):
    """Base exception for all Spendwise errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
        recoverable: Whether the error is potentially recoverable.

    Example:
        >>> raise SpendwiseError("Something went wrong", details={"code": 500})
        SpendwiseError: Something went wrong
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        """Initialize SpendwiseError.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context about the error.
            recoverable: Whether the error is potentially recoverable.
                Defaults to False.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message

    def __repr__(self) -> str:
        """Return detailed representation of the error."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"details={self.details!r}, "
            f"recoverable={self.recoverable!r})"
        )


class ValidationError(SpendwiseError):
    """Error raised when a transaction or budget value is rejected.

    Drafts are allowed to carry a zero amount, but an accepted transaction
    and a budget ceiling must both be positive.

    Attributes:
        field: The field that failed validation.
        value: The invalid value.
        constraint: The validation constraint that was violated.

    Example:
        >>> raise ValidationError(
        ...     "Amount must be positive",
        ...     field="amount",
        ...     value="0",
        ...     constraint="amount > 0",
        ... )
        ValidationError: Amount must be positive
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        """Initialize ValidationError.

        Args:
            message: Human-readable error description.
            field: The name of the field that failed validation.
            value: The invalid value.
            constraint: Description of the validation rule violated.
            details: Optional dictionary with additional context.
            recoverable: Whether the error can be fixed by user correction.
                Defaults to True since the user edits the draft and retries.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.field = field
        self.value = value
        self.constraint = constraint

        if field:
            self.details["field"] = field
        if value is not None:
            self.details["value"] = value
        if constraint:
            self.details["constraint"] = constraint


class TransactionNotFoundError(SpendwiseError):
    """Error raised when a ledger operation names an unknown transaction id.

    Attributes:
        transaction_id: The id that was not found.

    Example:
        >>> raise TransactionNotFoundError(
        ...     "No transaction with id 'abc'",
        ...     transaction_id="abc",
        ... )
        TransactionNotFoundError: No transaction with id 'abc'
    """

    def __init__(
        self,
        message: str,
        *,
        transaction_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(message, details=details, recoverable=recoverable)
        self.transaction_id = transaction_id

        if transaction_id:
            self.details["transaction_id"] = transaction_id


class ConfigurationError(SpendwiseError):
    """Error raised when configuration is invalid or missing.

    Attributes:
        config_key: The configuration key that is problematic.
        expected: Description of the expected value or format.
        actual: The actual value found (if any).

    Example:
        >>> raise ConfigurationError(
        ...     "Unknown log format",
        ...     config_key="SPENDWISE_LOG_FORMAT",
        ...     expected="console or json",
        ... )
        ConfigurationError: Unknown log format
    """

    def __init__(
        self,
        message: str,
        *,
        config_key: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
        recoverable: bool = False,
    ) -> None:
        """Initialize ConfigurationError.

        Args:
            message: Human-readable error description.
            config_key: The name of the configuration key that is problematic.
            expected: Description of what value was expected.
            actual: The actual value found.
            details: Optional dictionary with additional context.
            recoverable: Whether the error can be fixed at runtime.
                Defaults to False.
        """
        super().__init__(message, details=details, recoverable=recoverable)
        self.config_key = config_key
        self.expected = expected
        self.actual = actual

        if config_key:
            self.details["config_key"] = config_key
        if expected:
            self.details["expected"] = expected
        if actual is not None:
            self.details["actual"] = actual


__all__ = [
    "SpendwiseError",
    "ValidationError",
    "TransactionNotFoundError",
    "ConfigurationError",
]
