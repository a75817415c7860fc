"""The ``wputils`` command line."""
