"""Core configuration and paths for treesync."""
