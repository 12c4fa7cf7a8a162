"""SteganoTool command line interface."""
