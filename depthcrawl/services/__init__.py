"""Crawl engine services and default collaborators."""
