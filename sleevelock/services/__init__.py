"""Output-side services: export, checks and mesh inspection."""
