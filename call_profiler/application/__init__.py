"""Application layer: the statistics recorder and its derived views."""
