"""Internal diagnostics."""
