"""FrogCrypto API application."""
