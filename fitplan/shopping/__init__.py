"""Shopping lists built from the meals of a user's plan."""
