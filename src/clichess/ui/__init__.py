"""PyQt6 front end: a read-only board view that forwards clicked moves."""
