"""Clinic data store, denormalization rules, derived views and form validation."""
