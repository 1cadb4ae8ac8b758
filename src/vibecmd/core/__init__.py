"""Core: settings, error taxonomy, path helpers."""
