"""Design constants for bite-sized dungeon generation."""
