"""Core runtime, configuration and diagnostics for the logging layer."""
