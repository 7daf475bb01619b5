from .card import Card, CardSession
from .lesson import InputDotsStep, LessonInputStep

__all__ = ["Card", "CardSession", "InputDotsStep", "LessonInputStep"]
