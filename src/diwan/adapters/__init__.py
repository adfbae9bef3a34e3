"""Host adapters embedding the editing core in UI toolkits."""
