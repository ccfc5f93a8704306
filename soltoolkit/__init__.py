"""Solana encoding helpers, polled HTTP JSON-RPC clients and Shadow Drive account tools."""

__version__ = "0.1.0"