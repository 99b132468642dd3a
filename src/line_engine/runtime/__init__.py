"""Runtime services shared by the buffer core and its hosts."""
