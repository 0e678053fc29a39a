"""Service layer: the release flow and its outcomes."""
