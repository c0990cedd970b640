"""Seed data for the settings seeder."""
