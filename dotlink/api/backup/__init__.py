"""Backup API module."""
