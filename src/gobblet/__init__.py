"""Minimax search engine for a four-by-four stacking game."""
