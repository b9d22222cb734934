"""Configuration, logging, errors and storage shared by the application."""
