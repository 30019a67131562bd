"""Shared building blocks: models, errors, lifecycle and the Gemini client handle."""
