"""Entry points for hbshelpers."""
