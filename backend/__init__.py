"""Backend package: application factory and settings."""
