"""Flashstudy: flashcard study backend with sets derived from flashcard tags."""
