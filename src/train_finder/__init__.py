"""Find the best scheduled trains between two stations."""
