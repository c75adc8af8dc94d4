"""zkday — open today's daily note in the Zettelkasten."""

__version__ = "0.1.0"
