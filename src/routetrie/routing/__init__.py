"""Routing: path-segment trie with exact, parametric and wildcard matching.

Routes are inserted as raw keys and resolved one segment at a time.
"""
