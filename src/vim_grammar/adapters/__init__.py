"""Host adapters feeding UI key events into the grammar."""
