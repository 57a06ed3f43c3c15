# type: ignore
"""Pytest bootstrap — keep the service off disk during tests."""
import os

os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("LOG_LEVEL", "WARNING")
