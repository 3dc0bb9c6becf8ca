"""Core types shared across federate."""
