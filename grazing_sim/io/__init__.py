"""I/O layer: Arrow schemas for run logs."""
