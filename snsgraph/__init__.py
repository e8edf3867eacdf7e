"""Undirected social-network graphs read from text files, with reports and BFS/DFS traversals."""

__version__ = "1.0.0"