"""Demo HTTP service exposing health and info endpoints, with an end-to-end verifier."""
