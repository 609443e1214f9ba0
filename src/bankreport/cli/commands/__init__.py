"""CLI commands for bankreport."""
