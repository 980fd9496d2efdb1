"""Main window mixins for DilationSandbox."""
