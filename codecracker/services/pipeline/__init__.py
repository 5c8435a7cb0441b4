"""
Cracking pipeline: plaintext scoring and the orchestrator.

1. Detect candidate cipher types (structural patterns, then statistics)
2. Run the registered solver for every candidate
3. Fuse detection confidence with plaintext quality
4. Rank, deduplicate and recursively unwrap layered encodings
"""
