"""Hair salon appointment booking backend."""
