"""Merge C# XML documentation comments into a single HTML page."""
