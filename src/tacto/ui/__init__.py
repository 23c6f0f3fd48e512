"""Qt view layer: the board window and application bootstrap."""
