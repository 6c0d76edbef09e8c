"""Pattern implementations.  No I/O, no CLI, no configuration."""
