"""Source discovery and language file persistence."""
