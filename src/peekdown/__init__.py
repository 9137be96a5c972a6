"""Peekdown: markdown Quick Look helper registration."""
