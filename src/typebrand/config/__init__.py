"""Settings discovery and logging setup for typebrand's own diagnostics."""
