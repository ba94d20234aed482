"""Infrastructure: logging setup."""
