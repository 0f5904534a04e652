"""Host adapters for the wizard core."""
