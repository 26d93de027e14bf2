"""Severity-tagged reporting to the screen and the log file."""
