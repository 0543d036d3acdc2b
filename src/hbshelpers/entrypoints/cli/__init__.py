"""hbshelpers command-line interface."""
