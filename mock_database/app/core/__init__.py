"""Core building blocks: settings, logging, errors and the seed store."""
