"""Seed data for the clinic data store."""
