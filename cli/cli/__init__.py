"""engine-config command-line interface."""
