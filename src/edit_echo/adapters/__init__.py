"""Host adapters that read live field state."""
