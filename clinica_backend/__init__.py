"""Clinic backend: patient records, appointments and audit trail."""

__version__ = "1.0.0"
