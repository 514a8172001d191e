"""Long float division, sparse matrix multiplication, array and list stacks, and car records."""

__version__ = "0.1.0"