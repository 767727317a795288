"""Record models for synthetic back-office data."""
