"""Domain layer: the error taxonomy and the concerns shared by every kind."""
