"""Utility functions for dx7dump."""

from dx7dump.utils.checksum import calculate_bank_checksum, verify_checksum
from dx7dump.utils.validation import BankValidator, ValidationResult, validate_bank, verify_bank

__all__ = [
    "calculate_bank_checksum",
    "verify_checksum",
    "BankValidator",
    "ValidationResult",
    "validate_bank",
    "verify_bank",
]
