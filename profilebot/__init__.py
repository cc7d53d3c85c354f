"""Discord bot that renders user profile header panels."""
