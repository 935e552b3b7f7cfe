"""Priority-ordered task manager."""
