"""HTTP value types — immutable Request, Response and Headers."""
