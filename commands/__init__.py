"""Click commands for the hacl CLI."""
