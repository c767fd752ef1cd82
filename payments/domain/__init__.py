"""Domain layer - entities and the interfaces they satisfy."""
