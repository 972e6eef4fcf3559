"""Application wiring: controller and background command execution."""
