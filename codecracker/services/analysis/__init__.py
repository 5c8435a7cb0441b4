"""Text statistics, character-set profiling and the English word list."""
