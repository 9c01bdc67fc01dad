"""ArgumentMiner: heuristic argument, claim and evidence detection for free-form text."""

__version__ = "0.1.0"
