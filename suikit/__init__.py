"""Client toolkit for the Sui JSON-RPC API: queries, Ed25519 keys, signing and SUI transfers."""

__version__ = "0.1.0"

__all__ = ["keys", "queries", "signing", "transactions", "types"]