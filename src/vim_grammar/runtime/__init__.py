"""Runtime services shared by the grammar and its hosts."""
