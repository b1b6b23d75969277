"""Text and JSON renderers for decoded ELF headers."""
