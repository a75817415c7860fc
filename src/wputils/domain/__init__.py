"""Domain records and errors shared across wputils."""
