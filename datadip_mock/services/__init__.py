"""Services: builders for the canned connector responses."""
