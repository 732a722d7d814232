"""Terminal ordering assistant for a restaurant menu."""
