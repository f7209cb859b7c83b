"""Hello World API definition service package."""
