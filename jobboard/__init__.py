"""jobboard: data access for job postings."""

__version__ = "0.1.0"
