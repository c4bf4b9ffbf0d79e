"""Built-in benchmark scenarios, discovered by BenchmarkRegistry."""
