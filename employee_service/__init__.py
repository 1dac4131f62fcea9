"""In-memory employee records service."""
