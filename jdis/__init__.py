"""Jaccard distance between the word sets of text files, with a hash table and a holdall."""

__version__ = "1.0.0"