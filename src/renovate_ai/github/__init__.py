"""GitHub side of the analyzer: reading pull requests and posting comments."""
