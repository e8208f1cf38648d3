"""Command-line interface for gglas-linker."""
