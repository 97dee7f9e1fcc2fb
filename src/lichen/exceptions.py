#!/usr/bin/env python3
"""
Lichen-specific exceptions.

All Lichen exceptions inherit from LichenError for easy catching.

The taxonomy core itself never raises: order comparisons, guard evaluation and
transition validation are total. These exceptions cover programming errors at
construction time and malformed interchange records.
"""


class LichenError(Exception):
    """Base exception for all Lichen errors."""


class SignatureError(LichenError):
    """Signature slots and slot symbols do not line up."""


class InterchangeError(LichenError):
    """A record could not be decoded into a Lichen value."""
