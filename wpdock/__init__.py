"""Docker Compose WordPress development environment manager."""
