"""Core library: escaping, parameter annotation, hydration and the client."""
