"""Recruiting boolean search-string builder."""
