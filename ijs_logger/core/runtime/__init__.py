"""Runtime configuration: settings classes and the process-owned logger runtime."""
