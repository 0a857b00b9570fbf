"""
Merchant's Guide to the Galaxy

Interprets statements that map galactic words to roman numerals and phrases
to Credits, and answers 'how much' / 'how many Credits' questions.
"""

from merchants_guide.resolver import ResolverConfig, SentenceResolver

__version__ = "0.1.0"

__all__ = ["ResolverConfig", "SentenceResolver", "__version__"]
