"""Data models for datekit."""
