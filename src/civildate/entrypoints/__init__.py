"""Entrypoints (inbound adapters) for civildate.

Expose the date value types to the outside world through the CLI. Parse and
validate inputs, call into the domain, and present results.
"""
