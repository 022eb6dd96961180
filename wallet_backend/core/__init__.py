"""Application core: configuration, messages, errors and wiring."""
