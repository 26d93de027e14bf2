"""Unique filename generation."""
