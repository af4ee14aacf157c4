"""Decoder and aggregator for on-chain token dominance aggregator accounts."""
