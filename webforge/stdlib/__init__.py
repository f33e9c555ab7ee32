"""Standard library of swappable build components."""
