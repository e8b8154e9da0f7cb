"""Read-side use cases. None of them write, so clients may poll freely."""
