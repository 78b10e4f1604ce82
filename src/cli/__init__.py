"""Command line and interactive menu front ends."""
