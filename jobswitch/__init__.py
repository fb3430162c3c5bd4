"""Fast Job Switcher command-line host."""
