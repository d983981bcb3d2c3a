"""Terminal helpers for the book log: validators, prompts, cancellation and rendering."""
