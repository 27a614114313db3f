"""Shared test fixtures for site-mirror tests."""
