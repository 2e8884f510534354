"""Test doubles shared across creator discovery tests."""
