"""Host adapters that embed a buffer inside UI toolkits."""
