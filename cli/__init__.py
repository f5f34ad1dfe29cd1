"""dx7dump command line interface."""
