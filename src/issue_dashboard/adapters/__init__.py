"""I/O adapters: configuration, GitHub REST access and report persistence."""
