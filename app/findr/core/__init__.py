"""Core infrastructure for findr: paths, output colors and logging."""
