"""Infrastructure layer - file input and the command line interface."""
