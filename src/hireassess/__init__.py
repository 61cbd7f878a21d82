"\"\"\"Rule-based technical assessment generation and scoring.\"\"\""

__version__ = "0.1.0"
