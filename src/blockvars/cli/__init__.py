"""blockvars CLI."""
