"""Sui JSON-RPC client with ed25519 key derivation, faucet requests and subscriptions."""

__version__ = "0.1.0"