"""Maintenance scripts for the translation database."""
