"""Settlement pipeline — validation, assembly, aggregation and rendering."""
