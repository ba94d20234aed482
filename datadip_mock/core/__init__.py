"""Core: error hierarchy shared by the API layer."""
