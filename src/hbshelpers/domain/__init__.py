"""Domain layer: call shapes, options, comparisons and descriptor access."""
