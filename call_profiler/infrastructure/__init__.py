"""Infrastructure layer: clock, memory probes, decorators and instrumentation."""
