"""Admin backend for a multilingual showcase site."""
