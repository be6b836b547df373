"""Simulation of robots delivering payloads in a small automated warehouse."""

__version__ = "0.1.0"