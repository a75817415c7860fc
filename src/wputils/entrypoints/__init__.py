"""Entry points for wputils (command line)."""
