"""Services built on top of the core datekit primitives."""
