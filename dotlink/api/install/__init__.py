"""Install API module."""
