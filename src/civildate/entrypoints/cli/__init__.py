"""Command-line interface for civildate."""
