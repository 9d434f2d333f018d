# apps/chat/companion.py

import random

CANNED_RESPONSES = [
    "I understand how you're feeling. Would you like to talk more about that?",
    "Thank you for sharing that with me. How does that make you feel?",
    "I'm here to listen. Is there anything specific that's bothering you?",
    "That's interesting. Tell me more about why you feel that way.",
    "I appreciate you opening up to me. What do you think would help in this situation?",
    "It sounds like you're going through a lot. Remember to take care of yourself.",
    "Have you tried taking some deep breaths when you feel this way?",
    "Sometimes writing down our thoughts can help us process them better.",
    "It's important to acknowledge your feelings. You're doing great by expressing them.",
    "Remember that it's okay to have bad days. Tomorrow is a new opportunity.",
]


class ResponseGenerator:
    """
    Produces the companion's reply to a user message.
    The class used at runtime is named by settings.WELLNESS['CHAT_RESPONSE_GENERATOR'].
    """

    def generate(self, user, message: str) -> str:
        raise NotImplementedError


class CannedResponseGenerator(ResponseGenerator):
    """
    Picks one of the fixed supportive replies uniformly at random.
    The message itself is ignored.
    """
    responses = CANNED_RESPONSES

    def generate(self, user, message: str) -> str:
        return random.choice(self.responses)
