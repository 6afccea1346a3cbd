"""Character, memory, string, linked-list, output and printf-style helpers, a chunked line reader, and a pipeline argument parser."""

__version__ = "0.1.0"