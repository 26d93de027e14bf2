"""Seeding of local, non-linked config files."""
