"""vibe-cmd: doc-bound command runner for AI coding assistants."""

__version__ = "0.1.0"
