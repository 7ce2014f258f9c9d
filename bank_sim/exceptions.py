"""Custom exception hierarchy for bank-sim."""


class BankSimError(Exception):
    """Base exception for all bank-sim errors."""


class ValidationError(BankSimError):
    """Raised when an identifier, amount or account parameter is malformed."""


class InsufficientFundsError(BankSimError):
    """Raised when a withdrawal would break the account's balance policy."""


class DuplicateAccountError(BankSimError):
    """Raised when an account number is already registered."""


class AccountNotFoundError(BankSimError):
    """Raised when a referenced account does not exist."""


class InvalidAccountOperationError(BankSimError):
    """Raised when an operation is not supported by the account type."""


class ConfigurationError(BankSimError):
    """Raised when configuration is invalid or missing."""
