"""Interactive and command-line front end for splitting and joining files."""
