"""Palate domain: learning liked/disliked aspects from meal feedback."""
