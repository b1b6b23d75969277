"""ElfHead core: engine, data models, and exceptions."""
