"""Platform services (logging, host filesystem helpers) shared by features."""
