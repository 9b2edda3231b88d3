"""Cross-cutting infrastructure: settings, logging, database, config loading."""
