"""ELF identification and header field decoders."""
