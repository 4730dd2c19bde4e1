"""Services Layer — request orchestration between validation and storage."""
