"""HTTP controllers package."""
