"""Command line interface for bankreport."""
