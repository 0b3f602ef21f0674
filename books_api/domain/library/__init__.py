"""Library bounded context: books and their authors."""
