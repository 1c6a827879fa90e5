"""Core maintenance logic: configuration, logging, stages and the pipeline."""
