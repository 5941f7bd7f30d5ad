"""
Exceptions raised by the Clinic Analytics Engine.
"""


class ClinicAnalyticsError(Exception):
    """Base class for engine errors."""


class MedicalDataError(ClinicAnalyticsError, ValueError):
    """A vocabulary table violates its load-time invariants."""
