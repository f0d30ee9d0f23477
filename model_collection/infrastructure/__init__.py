"""Infrastructure: process-level wiring (logging) kept out of core/."""
