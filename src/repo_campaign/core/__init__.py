"""File access and campaign load orchestration."""
