"""Grammar, range compiler and manifest readers."""
