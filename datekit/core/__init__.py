"""Core building blocks for datekit."""
