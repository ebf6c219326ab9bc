"""data — Static game content (entity archetypes, tuning file)."""
