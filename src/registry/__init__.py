"""Release sources for PHP distributions."""
