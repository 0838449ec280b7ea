"""Core logic for the prompt generator and newsletter signup endpoints."""
