"""Client-layer building blocks: errors, interfaces, HTTP, logging, resilience."""
