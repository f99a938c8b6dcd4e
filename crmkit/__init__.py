"""Tooling for the CRM frontend: build configuration, status reports and ticket spreadsheets."""

__version__ = "0.1.0"
