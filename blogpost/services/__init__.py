"""Services Layer — business rules between transport and persistence."""
