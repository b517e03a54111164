"""Feature packages: algorithms, data structures, and the virtual file system."""
