"""Textual front end for the character sheet and encounter loop."""
