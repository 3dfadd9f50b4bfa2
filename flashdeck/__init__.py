"""Flashdeck: categories, study sessions and flashcards over HTTP."""
