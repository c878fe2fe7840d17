"""Data loaders for seeding the address directory."""
