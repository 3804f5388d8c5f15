"""Core data types shared by the crafting engine, storage and CLI."""
