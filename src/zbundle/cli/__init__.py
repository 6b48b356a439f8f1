"""zbundle command line interface."""
