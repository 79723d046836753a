"""Infrastructure layer — adapters for pandas tables, JSON files, and networkx graphs."""
