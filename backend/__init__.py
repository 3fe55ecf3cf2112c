"""Validation service for form block submissions."""
