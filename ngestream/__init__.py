"""NgeStream comment thread backend."""
