"""Subcommands of the bmpedit command line."""
