"""Testing helpers – fakes for deterministic layout tests."""
