"""I/O layer: database connections and statement execution."""
