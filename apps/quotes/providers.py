# apps/quotes/providers.py

import random

QUOTES = [
    {'quote': "The only way to do great work is to love what you do.", 'author': "Steve Jobs"},
    {'quote': "Take a deep breath. You are exactly where you need to be.", 'author': "Unknown"},
    {'quote': "Be the change you wish to see in the world.", 'author': "Mahatma Gandhi"},
    {'quote': "Believe you can and you're halfway there.", 'author': "Theodore Roosevelt"},
    {'quote': "The purpose of our lives is to be happy.", 'author': "Dalai Lama"},
    {'quote': "You are never too old to set another goal or to dream a new dream.", 'author': "C.S. Lewis"},
    {'quote': "In the middle of difficulty lies opportunity.", 'author': "Albert Einstein"},
    {'quote': "It always seems impossible until it's done.", 'author': "Nelson Mandela"},
    {'quote': "Your mental health is a priority. Your happiness is essential.", 'author': "Unknown"},
    {'quote': "You are enough just as you are.", 'author': "Meghan Markle"},
]


class QuoteProvider:
    """
    Supplies the quote shown on the dashboard.
    The class used at runtime is named by settings.WELLNESS['QUOTE_PROVIDER'].
    """

    def get_quote(self, user) -> dict:
        raise NotImplementedError


class RandomQuoteProvider(QuoteProvider):
    """
    A fresh random pick on every call, despite the "of the day" label.
    """
    quotes = QUOTES

    def get_quote(self, user) -> dict:
        return dict(random.choice(self.quotes))
