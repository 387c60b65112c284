"""Character notebook review scheduling."""
