"""Clinic entity records and enumerations."""
