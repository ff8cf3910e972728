"""Configuration, database and logging helpers shared by all layers."""
